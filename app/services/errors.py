# app/services/errors.py
# Domain errors raised by services; endpoints map them to HTTP responses.
from __future__ import annotations
from typing import Any, Optional


class NotFoundError(ValueError):
    pass


class ConflictError(ValueError):
    """Unique value already taken (sub-product name, page slug)."""

    def __init__(self, message: str, *, field: str, code: str = "duplicate"):
        super().__init__(message)
        self.field = field
        self.code = code

    @property
    def errors(self) -> list[dict[str, Any]]:
        return [{"path": [self.field], "message": str(self), "code": self.code}]


class ValidationFailed(ValueError):
    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []
