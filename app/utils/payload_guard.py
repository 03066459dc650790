from __future__ import annotations

import json
from fastapi import HTTPException

from app.core.settings import settings


def document_size_kb(data: dict) -> float:
    # compact JSON to measure true wire-size
    b = json.dumps(data, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    return len(b) / 1024.0


def enforce_document_size(data: dict) -> None:
    """
    Enforces a maximum serialized JSON size (in KB) for a PageDocument.
    Raises HTTP 413 on overflow, or 400 when the document is not serializable.
    """
    limit_kb = float(getattr(settings, "MAX_PAGE_DATA_KB", 0) or 0)
    if limit_kb <= 0:
        return
    try:
        kb = document_size_kb(data)
    except (TypeError, ValueError):
        raise HTTPException(status_code=400, detail="Invalid JSON in data")
    if kb > limit_kb:
        raise HTTPException(
            status_code=413,
            detail=f"Payload too large: data is {kb:.1f}KB, limit is {limit_kb:.0f}KB",
        )
