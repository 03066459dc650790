# app/services/page_service.py
# Page storage: slug-addressed upsert of the builder artifacts.
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.content import Page
from app.services.errors import NotFoundError, ValidationFailed
from app.services.http_cache import compute_etag
from app.utils.payload_guard import enforce_document_size
from app.utils.slugs import is_valid_slug, slugify

logger = logging.getLogger(__name__)

# Static routes under /api/pages that a page slug would be shadowed by
RESERVED_SLUGS = frozenset({"suggest-slug"})


def list_pages(db: Session) -> Sequence[Page]:
    return db.scalars(select(Page).order_by(Page.updated_at.desc(), Page.id.desc())).all()


def get_page(db: Session, slug: str) -> Optional[Page]:
    return db.scalar(select(Page).where(Page.slug == slug))


def slug_exists(db: Session, slug: str) -> bool:
    if slug in RESERVED_SLUGS:
        return True
    return db.scalar(select(Page.id).where(Page.slug == slug).limit(1)) is not None


def suggest_slug(db: Session, title: str) -> tuple[str, bool]:
    """
    Returns (slug, available). The proposal is the slugified title; when it
    is taken a numeric suffix is appended until a free one is found.
    """
    base = slugify(title)
    if not base:
        return "", False
    if not slug_exists(db, base):
        return base, True
    n = 2
    while slug_exists(db, f"{base}-{n}"):
        n += 1
    return f"{base}-{n}", True


def validate_slug(slug: str) -> None:
    if not is_valid_slug(slug):
        raise ValidationFailed(
            "Invalid data",
            errors=[{
                "path": ["slug"],
                "message": "Slug must be lowercase letters, digits and single hyphens",
                "code": "invalid_slug",
            }],
        )
    if slug in RESERVED_SLUGS:
        raise ValidationFailed(
            "Invalid data",
            errors=[{"path": ["slug"], "message": f"'{slug}' is reserved", "code": "reserved_slug"}],
        )


def upsert_page(
    db: Session,
    *,
    slug: str,
    title: str,
    data: dict[str, Any],
    html_content: str,
    css_content: str,
) -> tuple[Page, bool]:
    """
    Writes all three artifacts in one statement so a reader never sees a
    document paired with a stale html/css export. Returns (page, created).
    """
    validate_slug(slug)
    enforce_document_size(data)

    page = get_page(db, slug)
    created = page is None
    if created:
        page = Page(slug=slug, title=title)
        db.add(page)
    page.title = title
    page.data = data
    page.html_content = html_content
    page.css_content = css_content
    db.flush()
    logger.info("%s page %s", "Created" if created else "Updated", slug)
    return page, created


def delete_page(db: Session, slug: str) -> None:
    page = get_page(db, slug)
    if not page:
        raise NotFoundError("Page not found")
    db.delete(page)
    db.flush()
    logger.info("Deleted page %s", slug)


def has_content(page: Page) -> bool:
    return bool((page.html_content or "").strip())


def page_etag(page: Page) -> str:
    # timestamps are left out: sqlite drops tzinfo on reload
    return compute_etag({
        "slug": page.slug,
        "title": page.title,
        "data": page.data,
        "html": page.html_content,
        "css": page.css_content,
    })
