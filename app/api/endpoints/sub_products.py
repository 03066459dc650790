# app/api/endpoints/sub_products.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.endpoints.crud import build_crud_router
from app.api.errors import raise_http
from app.db.session import get_db
from app.deps.auth import require_admin
from app.models.auth import User
from app.models.catalog import SubProduct
from app.schemas.catalog import SubProductCreate, SubProductIdsIn, SubProductOut, SubProductUpdate
from app.schemas.content import BuilderArtifactsIn
from app.services import catalog_service
from app.services.errors import NotFoundError, ValidationFailed
from app.utils.payload_guard import enforce_document_size

router = APIRouter()


@router.post("/by-ids")
def sub_products_by_ids(payload: SubProductIdsIn, db: Session = Depends(get_db)):
    rows = catalog_service.get_sub_products_by_ids(db, payload.ids)
    return {"subProducts": [SubProductOut.model_validate(sp) for sp in rows]}


@router.put("/{sub_product_id}/page")
def save_sub_product_page(
    sub_product_id: int,
    payload: BuilderArtifactsIn,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Builder save for a sub-product: document, html and css together."""
    enforce_document_size(payload.data)
    try:
        sp = catalog_service.save_sub_product_page(
            db,
            sub_product_id,
            data=payload.data,
            html_content=payload.html_content,
            css_content=payload.css_content,
        )
        db.commit()
    except (NotFoundError, ValidationFailed) as exc:
        db.rollback()
        raise_http(exc)
    db.refresh(sp)
    return {"message": "Page saved successfully!", "subProduct": SubProductOut.model_validate(sp)}


build_crud_router(
    router=router,
    model=SubProduct,
    create_schema=SubProductCreate,
    update_schema=SubProductUpdate,
    out_schema=SubProductOut,
    plural="subProducts",
    singular="subProduct",
    label="Sub-product",
    create_fn=catalog_service.create_sub_product,
    update_fn=catalog_service.update_sub_product,
    delete_fn=catalog_service.delete_sub_product,
)
