# app/api/endpoints/brands.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.endpoints.crud import build_crud_router
from app.db.session import get_db
from app.deps.analytics import track_page_visit
from app.models.catalog import Brand
from app.schemas.catalog import BrandCreate, BrandOut, BrandUpdate, ProductOut
from app.services import catalog_service

router = APIRouter()


@router.get("/{brand_id}/products", dependencies=[Depends(track_page_visit)])
def brand_products(brand_id: int, db: Session = Depends(get_db)):
    if db.get(Brand, brand_id) is None:
        raise HTTPException(status_code=404, detail="Brand not found")
    rows = catalog_service.list_products_by_brand(db, brand_id)
    return {"products": [ProductOut.model_validate(p) for p in rows]}


build_crud_router(
    router=router,
    model=Brand,
    create_schema=BrandCreate,
    update_schema=BrandUpdate,
    out_schema=BrandOut,
    plural="brands",
    singular="brand",
    label="Brand",
    delete_fn=catalog_service.delete_brand,
)
