# app/api/endpoints/pages.py
# Page registry API. Pages are addressed by slug; POST /{slug} is an upsert.
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Response
from sqlalchemy.orm import Session

from app.api.errors import raise_http
from app.db.session import get_db
from app.deps.analytics import track_page_visit
from app.deps.auth import require_admin
from app.models.auth import User
from app.schemas.content import PageOut, PageSaveIn
from app.services import page_service
from app.services.errors import NotFoundError, ValidationFailed
from app.services.http_cache import etag_matches
from app.utils.slugs import slugify

router = APIRouter()


def _get_page_or_404(db: Session, slug: str):
    page = page_service.get_page(db, slug)
    if not page:
        raise HTTPException(status_code=404, detail="Page not found")
    return page


@router.get("", dependencies=[Depends(track_page_visit)])
def list_pages(db: Session = Depends(get_db)):
    return {"pages": [PageOut.model_validate(p) for p in page_service.list_pages(db)]}


@router.get("/suggest-slug")
def suggest_slug(
    title: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    slug, available = page_service.suggest_slug(db, title)
    return {"slug": slug, "available": available, "proposed": slugify(title)}


@router.get("/{slug}", dependencies=[Depends(track_page_visit)])
def get_page(slug: str, response: Response, db: Session = Depends(get_db)):
    page = _get_page_or_404(db, slug)
    response.headers["ETag"] = page_service.page_etag(page)
    return {"page": PageOut.model_validate(page)}


@router.post("/{slug}")
def save_page(
    slug: str,
    payload: PageSaveIn,
    response: Response,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
    if_match: Optional[str] = Header(default=None, alias="If-Match"),
):
    """
    Writes data, htmlContent and cssContent together. Last write wins unless
    the caller sends If-Match with the ETag it last read.
    """
    if payload.slug and payload.slug != slug:
        raise HTTPException(
            status_code=400,
            detail={
                "message": "Invalid data",
                "errors": [{"path": ["slug"], "message": "Body slug does not match the URL", "code": "slug_mismatch"}],
            },
        )

    existing = page_service.get_page(db, slug)
    if if_match is not None:
        if existing is None or not etag_matches(if_match, page_service.page_etag(existing)):
            raise HTTPException(status_code=412, detail="Page was modified by someone else; reload and retry")

    try:
        page, created = page_service.upsert_page(
            db,
            slug=slug,
            title=payload.title,
            data=payload.data,
            html_content=payload.html_content,
            css_content=payload.css_content,
        )
        db.commit()
    except ValidationFailed as exc:
        db.rollback()
        raise_http(exc)
    db.refresh(page)

    response.status_code = 201 if created else 200
    response.headers["ETag"] = page_service.page_etag(page)
    return {
        "message": "Page created successfully" if created else "Page updated successfully",
        "page": PageOut.model_validate(page),
    }


@router.delete("/{slug}")
def delete_page(slug: str, db: Session = Depends(get_db), _: User = Depends(require_admin)):
    try:
        page_service.delete_page(db, slug)
    except NotFoundError as exc:
        raise_http(exc)
    db.commit()
    return {"message": "Page deleted successfully"}
