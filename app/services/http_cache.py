# app/services/http_cache.py
# ETag / Last-Modified / Cache-Control helpers for the public page routes
from __future__ import annotations

import hashlib
import json
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import Any, Optional

from fastapi import Response

from app.core.settings import settings


# -----------------------------
# ETags
# -----------------------------
def compute_etag(payload: Any) -> str:
    """sha256 over stable JSON; quoted so it can go straight into a header."""
    raw = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=str).encode("utf-8")
    return f'"{hashlib.sha256(raw).hexdigest()}"'


def etag_matches(header_value: Optional[str], etag: str) -> bool:
    """
    Evaluates If-None-Match / If-Match style lists: `*`, a single tag, or a
    comma separated list. Weak tags (W/"...") compare by their opaque value.
    """
    if not header_value:
        return False
    value = header_value.strip()
    if value == "*":
        return True
    wanted = etag[2:] if etag.startswith("W/") else etag
    for tag in value.split(","):
        tag = tag.strip()
        if tag.startswith("W/"):
            tag = tag[2:]
        if tag == wanted:
            return True
    return False


# -----------------------------
# HTTP-date helpers (UTC)
# -----------------------------
def _to_utc(dt: datetime) -> datetime:
    # naive datetimes come back from sqlite; they were written as UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def httpdate(dt: datetime) -> str:
    return format_datetime(_to_utc(dt), usegmt=True)


def parse_httpdate(value: str) -> datetime | None:
    """Parses an HTTP-date into an aware UTC datetime. None when unparsable."""
    try:
        dt = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None
    if dt is None:
        return None
    return _to_utc(dt)


def not_modified_since(header_value: Optional[str], last_modified: Optional[datetime]) -> bool:
    if not header_value or last_modified is None:
        return False
    since = parse_httpdate(header_value)
    if since is None:
        return False
    # HTTP-dates carry whole seconds only
    return _to_utc(last_modified).replace(microsecond=0) <= since


# -----------------------------
# Cache policy
# -----------------------------
def apply_public_cache_headers(
    resp: Response,
    *,
    etag: str | None,
    last_modified: datetime | None,
) -> None:
    if etag:
        resp.headers["ETag"] = etag
    if last_modified:
        resp.headers["Last-Modified"] = httpdate(last_modified)
    max_age = int(settings.PUBLIC_CACHE_MAX_AGE or 0)
    if max_age > 0:
        resp.headers["Cache-Control"] = f"public, max-age={max_age}, stale-while-revalidate={max_age * 2}"
    else:
        resp.headers["Cache-Control"] = "no-cache"


def apply_no_store(resp: Response) -> None:
    # previews and admin reads must never be cached by intermediaries
    resp.headers["Cache-Control"] = "no-store"
