# app/api/endpoints/content.py
# Editorial resources: blogs, gallery, portfolio, customers.
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.api.endpoints.crud import build_crud_router
from app.db.session import get_db
from app.deps.analytics import track_page_visit
from app.models.content import Blog, Customer, GalleryItem, PortfolioItem
from app.schemas.content import (
    BlogCreate, BlogOut, BlogUpdate,
    CustomerCreate, CustomerOut, CustomerUpdate,
    GalleryCreate, GalleryOut, GalleryUpdate,
    PortfolioCreate, PortfolioOut, PortfolioUpdate,
)

# ---------- Blogs (newest first) ----------
blogs_router = build_crud_router(
    model=Blog,
    create_schema=BlogCreate,
    update_schema=BlogUpdate,
    out_schema=BlogOut,
    plural="blogs",
    singular="blog",
    label="Blog",
    order_by=Blog.created_at.desc(),
)

# ---------- Gallery ----------
gallery_router = build_crud_router(
    model=GalleryItem,
    create_schema=GalleryCreate,
    update_schema=GalleryUpdate,
    out_schema=GalleryOut,
    plural="gallery",
    singular="galleryItem",
    label="Gallery item",
    order_by=GalleryItem.created_at.desc(),
)

# ---------- Portfolio ----------
portfolio_router = APIRouter()


@portfolio_router.get("/category/{category}", dependencies=[Depends(track_page_visit)])
def portfolio_by_category(category: str, db: Session = Depends(get_db)):
    rows = db.scalars(
        select(PortfolioItem).where(PortfolioItem.category == category).order_by(PortfolioItem.id.asc())
    ).all()
    return {"portfolioItems": [PortfolioOut.model_validate(r) for r in rows]}


build_crud_router(
    router=portfolio_router,
    model=PortfolioItem,
    create_schema=PortfolioCreate,
    update_schema=PortfolioUpdate,
    out_schema=PortfolioOut,
    plural="portfolioItems",
    singular="portfolioItem",
    label="Portfolio item",
)

# ---------- Customers ----------
customers_router = APIRouter()


@customers_router.get("/active", dependencies=[Depends(track_page_visit)])
def active_customers(db: Session = Depends(get_db)):
    rows = db.scalars(
        select(Customer).where(Customer.is_active.is_(True)).order_by(Customer.id.asc())
    ).all()
    return {"customers": [CustomerOut.model_validate(r) for r in rows]}


build_crud_router(
    router=customers_router,
    model=Customer,
    create_schema=CustomerCreate,
    update_schema=CustomerUpdate,
    out_schema=CustomerOut,
    plural="customers",
    singular="customer",
    label="Customer",
)
