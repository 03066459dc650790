# app/api/endpoints/products.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.endpoints.crud import build_crud_router
from app.api.errors import raise_http
from app.db.session import get_db
from app.deps.analytics import track_page_visit
from app.models.catalog import Product
from app.schemas.catalog import ProductCreate, ProductOut, ProductUpdate, SubProductCardOut
from app.services import catalog_service
from app.services.errors import NotFoundError

router = APIRouter()


@router.get("/{product_id}/detail", dependencies=[Depends(track_page_visit)])
def product_detail(product_id: int, db: Session = Depends(get_db)):
    """Product plus its sub-product cards in subProductIds order."""
    try:
        product, cards = catalog_service.build_product_detail(db, product_id)
    except NotFoundError as exc:
        raise_http(exc)
    return {
        "product": ProductOut.model_validate(product),
        "subProducts": [SubProductCardOut.model_validate(c) for c in cards],
    }


build_crud_router(
    router=router,
    model=Product,
    create_schema=ProductCreate,
    update_schema=ProductUpdate,
    out_schema=ProductOut,
    plural="products",
    singular="product",
    label="Product",
    create_fn=catalog_service.create_product,
    update_fn=catalog_service.update_product,
)
