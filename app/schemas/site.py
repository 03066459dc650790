# app/schemas/site.py
from __future__ import annotations
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from app.schemas.base import ApiModel


# ---------- ContactInfo (singleton) ----------
class ContactInfoUpdate(ApiModel):
    address: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    whatsapp: Optional[str] = None
    linkedin: Optional[str] = None

class ContactInfoOut(ApiModel):
    id: int
    address: str
    phone: str
    email: str
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    whatsapp: Optional[str] = None
    linkedin: Optional[str] = None
    updated_at: Optional[datetime] = None


# ---------- AboutStats (singleton) ----------
class Testimonial(ApiModel):
    name: str
    company: str
    text: str

class AboutStatsUpdate(ApiModel):
    years_experience: Optional[int] = Field(None, ge=0)
    customers_served: Optional[int] = Field(None, ge=0)
    products_supplied: Optional[int] = Field(None, ge=0)
    customers_testimonials: Optional[list[Testimonial]] = None

class AboutStatsOut(ApiModel):
    id: int
    years_experience: int
    customers_served: int
    products_supplied: int
    customers_testimonials: list[Testimonial] = Field(default_factory=list)
    updated_at: Optional[datetime] = None


# ---------- Inquiry ----------
class InquiryCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=160)
    email: EmailStr
    message: str = Field(..., min_length=1)
    product_id: Optional[int] = None

class InquiryOut(ApiModel):
    id: int
    name: str
    email: str
    message: str
    product_id: Optional[int] = None
    read: bool
    created_at: Optional[datetime] = None


# ---------- Analytics ----------
class PageVisitOut(ApiModel):
    id: int
    page_visited: str
    ip_address: Optional[str] = None
    timestamp: Optional[datetime] = None

class AnalyticsOut(ApiModel):
    total_visits: int
    visits_per_page: dict[str, int]
    recent_visits: list[PageVisitOut]
