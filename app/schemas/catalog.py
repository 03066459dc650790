# app/schemas/catalog.py
# Requests/responses for Brands, Products and SubProducts
from __future__ import annotations
from datetime import datetime
from typing import Optional, Literal, Any

from pydantic import Field

from app.schemas.base import ApiModel

ContentType = Literal["manual", "external"]


# ---------- Brand ----------
class BrandCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=160)
    logo: str = Field(..., min_length=1)
    description: Optional[str] = None

class BrandUpdate(ApiModel):
    name: Optional[str] = Field(None, min_length=1, max_length=160)
    logo: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None

class BrandOut(BrandCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ---------- Product ----------
class ProductCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    photos: list[str] = Field(default_factory=list)
    sub_product_ids: list[int] = Field(default_factory=list)
    brand_id: Optional[int] = None

class ProductUpdate(ApiModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    photos: Optional[list[str]] = None
    sub_product_ids: Optional[list[int]] = None
    brand_id: Optional[int] = None

class ProductOut(ProductCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ---------- SubProduct ----------
class SpecificationItem(ApiModel):
    key: str
    value: str

# Builder artifacts (pageData, htmlContent, cssContent) are written only
# through PUT /sub-products/{id}/page, all three together.
class SubProductCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=200)
    model_number: Optional[str] = Field(None, max_length=120)
    photo: str = Field(..., min_length=1)
    description: Optional[str] = None
    content_type: ContentType = "manual"
    content: Optional[str] = None
    external_url: Optional[str] = None
    specifications: Optional[list[SpecificationItem]] = Field(default_factory=list)
    features: Optional[list[str]] = Field(default_factory=list)

class SubProductUpdate(ApiModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    model_number: Optional[str] = Field(None, max_length=120)
    photo: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    content_type: Optional[ContentType] = None
    content: Optional[str] = None
    external_url: Optional[str] = None
    specifications: Optional[list[SpecificationItem]] = None
    features: Optional[list[str]] = None

class SubProductOut(ApiModel):
    id: int
    name: str
    model_number: Optional[str] = None
    photo: str
    description: Optional[str] = None
    content_type: ContentType
    content: Optional[str] = None
    external_url: Optional[str] = None
    specifications: Optional[list[SpecificationItem]] = None
    features: Optional[list[str]] = None
    page_data: Optional[dict[str, Any]] = None
    html_content: Optional[str] = None
    css_content: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class SubProductIdsIn(ApiModel):
    ids: list[int] = Field(..., min_length=1)


# ---------- Product detail (public) ----------
class SubProductCardOut(ApiModel):
    id: int
    name: str
    photo: str
    model_number: Optional[str] = None
    description: Optional[str] = None
    content_type: ContentType
    href: str
    target: Literal["_blank", "_self"]
    rel: Optional[str] = None
