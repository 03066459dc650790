# app/schemas/content.py
# Requests/responses for Pages (builder) and the editorial resources
from __future__ import annotations
from datetime import datetime
from typing import Optional, Literal, Any

from pydantic import Field

from app.schemas.base import ApiModel


# ---------- Builder artifacts ----------
class BuilderArtifactsIn(ApiModel):
    """The three artifacts a builder save always carries together."""
    data: dict[str, Any]
    html_content: str
    css_content: str

class PageSaveIn(BuilderArtifactsIn):
    slug: Optional[str] = Field(None, max_length=160)
    title: str = Field(..., min_length=1, max_length=200)

class PageOut(ApiModel):
    id: int
    slug: str
    title: str
    data: dict[str, Any]
    html_content: Optional[str] = None
    css_content: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class PreviewIn(ApiModel):
    title: str = "Preview"
    html_content: str = ""
    css_content: str = ""


# ---------- Blog ----------
class BlogPhoto(ApiModel):
    url: str
    position: Literal["top", "middle", "bottom"] = "top"

class BlogCreate(ApiModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    photos: list[BlogPhoto] = Field(default_factory=list)

class BlogUpdate(ApiModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = Field(None, min_length=1)
    photos: Optional[list[BlogPhoto]] = None

class BlogOut(BlogCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ---------- Gallery ----------
class GalleryCreate(ApiModel):
    photo: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)

class GalleryUpdate(ApiModel):
    photo: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)

class GalleryOut(GalleryCreate):
    id: int
    created_at: Optional[datetime] = None


# ---------- Portfolio ----------
class PortfolioCreate(ApiModel):
    title: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=120)
    description: str = Field(..., min_length=1)
    project_details: Optional[str] = None
    image: str = Field(..., min_length=1)

class PortfolioUpdate(ApiModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[str] = Field(None, min_length=1, max_length=120)
    description: Optional[str] = Field(None, min_length=1)
    project_details: Optional[str] = None
    image: Optional[str] = Field(None, min_length=1)

class PortfolioOut(PortfolioCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ---------- Customer ----------
class CustomerCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=200)
    logo: str = Field(..., min_length=1)
    website: str = Field(..., pattern=r"^https?://")
    description: Optional[str] = None
    is_active: bool = True

class CustomerUpdate(ApiModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    logo: Optional[str] = Field(None, min_length=1)
    website: Optional[str] = Field(None, pattern=r"^https?://")
    description: Optional[str] = None
    is_active: Optional[bool] = None

class CustomerOut(CustomerCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
