# app/api/endpoints/site.py
# Singletons (contact info, about stats), inquiries and analytics.
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.api.errors import raise_http
from app.db.session import get_db
from app.deps.analytics import track_page_visit
from app.deps.auth import require_admin
from app.models.auth import User
from app.models.site import Inquiry
from app.schemas.site import (
    AboutStatsOut, AboutStatsUpdate,
    AnalyticsOut,
    ContactInfoOut, ContactInfoUpdate,
    InquiryCreate, InquiryOut,
    PageVisitOut,
)
from app.services import site_service
from app.services.errors import NotFoundError, ValidationFailed

contact_router = APIRouter()
about_router = APIRouter()
inquiries_router = APIRouter()
analytics_router = APIRouter()


# ---------- Contact info ----------
@contact_router.get("", dependencies=[Depends(track_page_visit)])
def get_contact_info(db: Session = Depends(get_db)):
    info = site_service.get_contact_info(db)
    db.commit()
    return {"contactInfo": ContactInfoOut.model_validate(info)}


@contact_router.put("")
def update_contact_info(
    payload: ContactInfoUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    info = site_service.update_contact_info(db, payload.model_dump(exclude_unset=True))
    db.commit()
    db.refresh(info)
    return {"message": "Contact info updated successfully", "contactInfo": ContactInfoOut.model_validate(info)}


# ---------- About stats ----------
@about_router.get("", dependencies=[Depends(track_page_visit)])
def get_about_stats(db: Session = Depends(get_db)):
    stats = site_service.get_about_stats(db)
    db.commit()
    return {"aboutStats": AboutStatsOut.model_validate(stats)}


@about_router.put("")
def update_about_stats(
    payload: AboutStatsUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    stats = site_service.update_about_stats(db, payload.model_dump(exclude_unset=True))
    db.commit()
    db.refresh(stats)
    return {"message": "About stats updated successfully", "aboutStats": AboutStatsOut.model_validate(stats)}


# ---------- Inquiries ----------
@inquiries_router.get("")
def list_inquiries(db: Session = Depends(get_db), _: User = Depends(require_admin)):
    rows = db.scalars(select(Inquiry).order_by(Inquiry.created_at.desc(), Inquiry.id.desc())).all()
    return {"inquiries": [InquiryOut.model_validate(r) for r in rows]}


@inquiries_router.post("", status_code=201)
def create_inquiry(payload: InquiryCreate, db: Session = Depends(get_db)):
    """Public contact form."""
    try:
        inquiry = site_service.create_inquiry(db, payload.model_dump())
        db.commit()
    except ValidationFailed as exc:
        db.rollback()
        raise_http(exc)
    db.refresh(inquiry)
    return {"message": "Inquiry submitted successfully", "inquiry": InquiryOut.model_validate(inquiry)}


@inquiries_router.put("/{inquiry_id}/read")
def mark_inquiry_read(inquiry_id: int, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    try:
        inquiry = site_service.mark_inquiry_read(db, inquiry_id)
    except NotFoundError as exc:
        raise_http(exc)
    db.commit()
    db.refresh(inquiry)
    return {"message": "Inquiry marked as read", "inquiry": InquiryOut.model_validate(inquiry)}


@inquiries_router.delete("/{inquiry_id}")
def delete_inquiry(inquiry_id: int, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    inquiry = db.get(Inquiry, inquiry_id)
    if not inquiry:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    db.delete(inquiry)
    db.commit()
    return {"message": "Inquiry deleted successfully"}


# ---------- Analytics ----------
@analytics_router.get("")
def get_analytics(
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    summary = site_service.analytics_summary(db, recent=limit)
    out = AnalyticsOut(
        total_visits=summary["total_visits"],
        visits_per_page=summary["visits_per_page"],
        recent_visits=[PageVisitOut.model_validate(v) for v in summary["recent_visits"]],
    )
    return {"analytics": out}
