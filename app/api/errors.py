# app/api/errors.py
# Domain errors -> HTTPException with the { message, errors? } detail.
from __future__ import annotations

from typing import NoReturn

from fastapi import HTTPException

from app.services.errors import ConflictError, NotFoundError, ValidationFailed


def raise_http(exc: Exception) -> NoReturn:
    if isinstance(exc, NotFoundError):
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    if isinstance(exc, (ConflictError, ValidationFailed)):
        raise HTTPException(status_code=400, detail={"message": str(exc), "errors": exc.errors}) from exc
    raise exc