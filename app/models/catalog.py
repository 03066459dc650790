# app/models/catalog.py
# Catalog: Brand -> Product -> SubProduct (ordered id list on Product)
from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import String, Text, Integer, ForeignKey, DateTime, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, JSONType

ContentType = Enum(
    "manual", "external",
    name="sub_product_content_type",
    create_constraint=True,
    validate_strings=True,
    native_enum=False,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Brand(Base):
    __tablename__ = "brands"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(160))
    logo: Mapped[str] = mapped_column(Text)  # URL or base64 data URL
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    # no cascade: deleting a brand only detaches its products
    products: Mapped[list["Product"]] = relationship("Product", back_populates="brand", passive_deletes=True)


class Product(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    description: Mapped[str] = mapped_column(Text)
    photos: Mapped[list] = mapped_column(JSONType, default=list)
    # ordered SubProduct ids; cleaned up by the service layer, not by the DB
    sub_product_ids: Mapped[list] = mapped_column(JSONType, default=list)
    brand_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("brands.id", ondelete="SET NULL"), nullable=True, index=True
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    brand: Mapped[Optional["Brand"]] = relationship("Brand", back_populates="products")


class SubProduct(Base):
    __tablename__ = "sub_products"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200), unique=True, index=True)
    model_number: Mapped[Optional[str]] = mapped_column(String(120), nullable=True)
    photo: Mapped[str] = mapped_column(Text)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    content_type: Mapped[str] = mapped_column(ContentType, default="manual")
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)        # rich text (manual)
    external_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)   # external
    specifications: Mapped[Optional[list]] = mapped_column(JSONType, nullable=True)
    features: Mapped[Optional[list]] = mapped_column(JSONType, nullable=True)

    # page builder artifacts, always written together
    page_data: Mapped[Optional[dict]] = mapped_column(JSONType, nullable=True)
    html_content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    css_content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)
