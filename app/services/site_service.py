# app/services/site_service.py
# Singletons (contact info, about stats), inquiries and the visit log.
from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.catalog import Product
from app.models.site import AboutStats, ContactInfo, Inquiry, PageVisit
from app.services.crud_service import apply_patch
from app.services.errors import NotFoundError, ValidationFailed

logger = logging.getLogger(__name__)

DEFAULT_CONTACT_INFO: dict[str, Any] = {
    "address": "123 Emergency Avenue, Industrial Zone, Phoenix, AZ 85001, USA",
    "phone": "+1 (555) 123-4567",
    "email": "info@nationalfire.com",
    "facebook": "https://facebook.com/nationalfire",
    "instagram": "https://instagram.com/nationalfire",
    "whatsapp": "https://wa.me/15551234567",
    "linkedin": "https://linkedin.com/company/nationalfire",
}

DEFAULT_ABOUT_STATS: dict[str, Any] = {
    "years_experience": 35,
    "customers_served": 500,
    "products_supplied": 1200,
    "customers_testimonials": [],
}


# -------- Singletons --------
def get_contact_info(db: Session) -> ContactInfo:
    """The row is created with defaults on first read."""
    info = db.scalar(select(ContactInfo).order_by(ContactInfo.id.asc()).limit(1))
    if info is None:
        info = ContactInfo(**DEFAULT_CONTACT_INFO)
        db.add(info)
        db.flush()
    return info


def update_contact_info(db: Session, patch: dict[str, Any]) -> ContactInfo:
    info = get_contact_info(db)
    apply_patch(info, patch)
    db.flush()
    return info


def get_about_stats(db: Session) -> AboutStats:
    stats = db.scalar(select(AboutStats).order_by(AboutStats.id.asc()).limit(1))
    if stats is None:
        stats = AboutStats(**DEFAULT_ABOUT_STATS)
        db.add(stats)
        db.flush()
    return stats


def update_about_stats(db: Session, patch: dict[str, Any]) -> AboutStats:
    stats = get_about_stats(db)
    apply_patch(stats, patch)
    db.flush()
    return stats


# -------- Inquiries --------
def create_inquiry(db: Session, values: dict[str, Any]) -> Inquiry:
    product_id = values.get("product_id")
    if product_id is not None and db.get(Product, product_id) is None:
        raise ValidationFailed(
            "Invalid data",
            errors=[{"path": ["productId"], "message": f"Product {product_id} does not exist", "code": "unknown_product"}],
        )
    inquiry = Inquiry(**values)
    db.add(inquiry)
    db.flush()
    logger.info("New inquiry from %s", inquiry.email)
    return inquiry


def mark_inquiry_read(db: Session, inquiry_id: int) -> Inquiry:
    inquiry = db.get(Inquiry, inquiry_id)
    if not inquiry:
        raise NotFoundError("Inquiry not found")
    inquiry.read = True
    db.flush()
    return inquiry


# -------- Analytics --------
def log_visit(db: Session, path: str, ip_address: Optional[str]) -> PageVisit:
    visit = PageVisit(page_visited=path, ip_address=ip_address)
    db.add(visit)
    db.flush()
    return visit


def analytics_summary(db: Session, *, recent: int = 10) -> dict[str, Any]:
    total = db.scalar(select(func.count(PageVisit.id))) or 0
    rows = db.execute(
        select(PageVisit.page_visited, func.count(PageVisit.id)).group_by(PageVisit.page_visited)
    ).all()
    recent_visits = db.scalars(
        select(PageVisit).order_by(PageVisit.timestamp.desc(), PageVisit.id.desc()).limit(recent)
    ).all()
    return {
        "total_visits": int(total),
        "visits_per_page": {path: int(count) for path, count in rows},
        "recent_visits": list(recent_visits),
    }
