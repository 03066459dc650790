# app/api/router.py
from fastapi import APIRouter

from app.api.endpoints import auth, brands, builder, content, health, pages, products, site, sub_products

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router)  # /login, /logout, /me

# catalog
api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(sub_products.router, prefix="/sub-products", tags=["sub-products"])
api_router.include_router(brands.router, prefix="/brands", tags=["brands"])

# builder pages
api_router.include_router(pages.router, prefix="/pages", tags=["pages"])
api_router.include_router(builder.router, prefix="/builder")

# editorial
api_router.include_router(content.blogs_router, prefix="/blogs", tags=["blogs"])
api_router.include_router(content.gallery_router, prefix="/gallery", tags=["gallery"])
api_router.include_router(content.portfolio_router, prefix="/portfolio", tags=["portfolio"])
api_router.include_router(content.customers_router, prefix="/customers", tags=["customers"])

# site
api_router.include_router(site.contact_router, prefix="/contact-info", tags=["site"])
api_router.include_router(site.about_router, prefix="/about-stats", tags=["site"])
api_router.include_router(site.inquiries_router, prefix="/inquiries", tags=["inquiries"])
api_router.include_router(site.analytics_router, prefix="/analytics", tags=["analytics"])
