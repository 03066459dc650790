# app/core/errors.py
# Error envelope for the whole API: { "message": str, "errors"?: list }
from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def _envelope(detail: Any) -> dict:
    """
    Endpoints raise HTTPException with either a plain string detail or a
    dict {"message": ..., "errors": [...]}; both end up as the same shape.
    """
    if isinstance(detail, dict):
        body = {"message": str(detail.get("message") or "Error")}
        if detail.get("errors") is not None:
            body["errors"] = detail["errors"]
        return body
    return {"message": str(detail)}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(_envelope(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for err in exc.errors():
        errors.append({
            "path": [str(p) for p in err.get("loc", ()) if p != "body"],
            "message": err.get("msg"),
            "code": err.get("type"),
        })
    return JSONResponse(status_code=400, content={"message": "Invalid data", "errors": errors})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Server error"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
