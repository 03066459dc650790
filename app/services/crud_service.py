# app/services/crud_service.py
# Plain record accessors shared by the simple content resources.
from __future__ import annotations
from typing import Any, Optional, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.base import Base

M = TypeVar("M", bound=Base)


def list_records(db: Session, model: type[M], *, order_by: Any = None) -> Sequence[M]:
    stmt = select(model)
    stmt = stmt.order_by(order_by if order_by is not None else model.id.asc())
    return db.scalars(stmt).all()


def get_record(db: Session, model: type[M], record_id: int) -> Optional[M]:
    return db.get(model, record_id)


def create_record(db: Session, model: type[M], values: dict[str, Any]) -> M:
    obj = model(**values)
    db.add(obj)
    db.flush()
    return obj


def apply_patch(obj: Base, patch: dict[str, Any]) -> None:
    """Explicit nulls are kept for nullable columns only."""
    columns = obj.__table__.c
    for key, value in patch.items():
        if value is None and key in columns and not columns[key].nullable:
            continue
        setattr(obj, key, value)


def update_record(db: Session, obj: M, patch: dict[str, Any]) -> M:
    apply_patch(obj, patch)
    db.flush()
    return obj


def delete_record(db: Session, obj: Base) -> None:
    db.delete(obj)
    db.flush()
