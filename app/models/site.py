# app/models/site.py
# Site-wide singletons (contact info, about stats), inquiries and visit log
from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import String, Text, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, JSONType


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ContactInfo(Base):
    __tablename__ = "contact_info"

    id: Mapped[int] = mapped_column(primary_key=True)
    address: Mapped[str] = mapped_column(Text)
    phone: Mapped[str] = mapped_column(String(80))
    email: Mapped[str] = mapped_column(String(160))
    facebook: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    instagram: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    whatsapp: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    linkedin: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)

    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)


class AboutStats(Base):
    __tablename__ = "about_stats"

    id: Mapped[int] = mapped_column(primary_key=True)
    years_experience: Mapped[int] = mapped_column(Integer, default=0)
    customers_served: Mapped[int] = mapped_column(Integer, default=0)
    products_supplied: Mapped[int] = mapped_column(Integer, default=0)
    customers_testimonials: Mapped[list] = mapped_column(JSONType, default=list)  # [{name, company, text}]

    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)


class Inquiry(Base):
    __tablename__ = "inquiries"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(160))
    email: Mapped[str] = mapped_column(String(160))
    message: Mapped[str] = mapped_column(Text)
    product_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("products.id", ondelete="SET NULL"), nullable=True
    )
    read: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)


class PageVisit(Base):
    __tablename__ = "analytics"

    id: Mapped[int] = mapped_column(primary_key=True)
    page_visited: Mapped[str] = mapped_column(String(512), index=True)
    ip_address: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, index=True)
