# app/deps/analytics.py
from __future__ import annotations

import logging

from fastapi import Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.settings import settings
from app.db.session import get_db
from app.services.site_service import log_visit

logger = logging.getLogger(__name__)


def _client_ip(request: Request) -> str | None:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip() or None
    return request.client.host if request.client else None


def track_page_visit(request: Request, db: Session = Depends(get_db)) -> None:
    """
    Records public GET reads as Analytics rows. A failure to record is
    logged and never fails the request.
    """
    if not settings.ANALYTICS_ENABLED or request.method != "GET":
        return
    try:
        log_visit(db, request.url.path, _client_ip(request))
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.warning("Could not record visit to %s", request.url.path, exc_info=True)
