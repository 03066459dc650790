# app/builder/handlers.py
# Save/load strategies a host injects into a BuilderSession.
from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Union

from sqlalchemy.orm import Session

from app.models.catalog import SubProduct
from app.services import catalog_service, page_service

logger = logging.getLogger(__name__)

# (document, html, css) -> None; raises on failure
SaveHandler = Callable[[dict[str, Any], str, str], None]
# slug -> stored document (None when nothing has been saved yet)
DocumentLoader = Callable[[str], Optional[dict[str, Any]]]


def page_save_handler(db: Session, slug: str, title: Union[str, Callable[[], str]]) -> SaveHandler:
    """Default host: upsert into the Page keyed by slug, one transaction."""

    def _save(doc: dict[str, Any], html: str, css: str) -> None:
        current_title = title() if callable(title) else title
        try:
            page_service.upsert_page(
                db, slug=slug, title=current_title, data=doc, html_content=html, css_content=css
            )
            db.commit()
        except Exception:
            db.rollback()
            raise

    return _save


def sub_product_save_handler(db: Session, sub_product_id: int) -> SaveHandler:
    def _save(doc: dict[str, Any], html: str, css: str) -> None:
        try:
            catalog_service.save_sub_product_page(
                db, sub_product_id, data=doc, html_content=html, css_content=css
            )
            db.commit()
        except Exception:
            db.rollback()
            raise

    return _save


def page_document_loader(db: Session) -> DocumentLoader:
    def _load(slug: str) -> Optional[dict[str, Any]]:
        page = page_service.get_page(db, slug)
        if page is None or not page.data:
            return None
        return page.data

    return _load


def sub_product_document_loader(db: Session, sub_product_id: int) -> DocumentLoader:
    def _load(_slug: str) -> Optional[dict[str, Any]]:
        sp = db.get(SubProduct, sub_product_id)
        if sp is None or not sp.page_data:
            return None
        return sp.page_data

    return _load
