# app/api/endpoints/crud.py
# Uniform resource routes:
#   GET    ""       -> { plural: T[] }
#   GET    /{id}    -> { singular: T }                 | 404
#   POST   ""       -> 201 { message, singular: T }    | 400
#   PUT    /{id}    -> { message, singular: T }        | 404 / 400  (PATCH too)
#   DELETE /{id}    -> { message }                     | 404
# No postponed annotations here: body types come from the factory arguments.
from typing import Any, Callable, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.errors import raise_http
from app.db.session import get_db
from app.deps.analytics import track_page_visit
from app.deps.auth import require_admin
from app.models.auth import User
from app.services import crud_service
from app.services.errors import ConflictError, NotFoundError, ValidationFailed

CreateFn = Callable[[Session, dict[str, Any]], Any]
UpdateFn = Callable[[Session, int, dict[str, Any]], Any]
DeleteFn = Callable[[Session, int], bool]


def build_crud_router(
    *,
    model: Any,
    create_schema: Any,
    update_schema: Any,
    out_schema: Any,
    plural: str,
    singular: str,
    label: str,
    order_by: Any = None,
    create_fn: Optional[CreateFn] = None,
    update_fn: Optional[UpdateFn] = None,
    delete_fn: Optional[DeleteFn] = None,
    router: Optional[APIRouter] = None,
) -> APIRouter:
    """
    Pass `router` when the resource has extra static paths (e.g. /active):
    they must be registered before the /{item_id} routes added here.
    """
    router = router or APIRouter()

    def _create(db: Session, values: dict[str, Any]) -> Any:
        if create_fn:
            return create_fn(db, values)
        return crud_service.create_record(db, model, values)

    def _update(db: Session, item_id: int, patch: dict[str, Any]) -> Any:
        if update_fn:
            return update_fn(db, item_id, patch)
        obj = crud_service.get_record(db, model, item_id)
        if not obj:
            raise NotFoundError(f"{label} not found")
        return crud_service.update_record(db, obj, patch)

    def _delete(db: Session, item_id: int) -> bool:
        if delete_fn:
            return delete_fn(db, item_id)
        obj = crud_service.get_record(db, model, item_id)
        if not obj:
            return False
        crud_service.delete_record(db, obj)
        return True

    @router.get("", dependencies=[Depends(track_page_visit)])
    def list_items(db: Session = Depends(get_db)):
        rows = crud_service.list_records(db, model, order_by=order_by)
        return {plural: [out_schema.model_validate(r) for r in rows]}

    @router.get("/{item_id}", dependencies=[Depends(track_page_visit)])
    def get_item(item_id: int, db: Session = Depends(get_db)):
        obj = crud_service.get_record(db, model, item_id)
        if not obj:
            raise HTTPException(status_code=404, detail=f"{label} not found")
        return {singular: out_schema.model_validate(obj)}

    @router.post("", status_code=201)
    def create_item(
        payload: create_schema,
        db: Session = Depends(get_db),
        _: User = Depends(require_admin),
    ):
        try:
            obj = _create(db, payload.model_dump())
            db.commit()
        except (NotFoundError, ConflictError, ValidationFailed) as exc:
            db.rollback()
            raise_http(exc)
        db.refresh(obj)
        return {"message": f"{label} created successfully", singular: out_schema.model_validate(obj)}

    def update_item(
        item_id: int,
        payload: update_schema,
        db: Session = Depends(get_db),
        _: User = Depends(require_admin),
    ):
        try:
            obj = _update(db, item_id, payload.model_dump(exclude_unset=True))
            db.commit()
        except (NotFoundError, ConflictError, ValidationFailed) as exc:
            db.rollback()
            raise_http(exc)
        db.refresh(obj)
        return {"message": f"{label} updated successfully", singular: out_schema.model_validate(obj)}

    router.add_api_route("/{item_id}", update_item, methods=["PUT", "PATCH"])

    @router.delete("/{item_id}")
    def delete_item(
        item_id: int,
        db: Session = Depends(get_db),
        _: User = Depends(require_admin),
    ):
        if not _delete(db, item_id):
            raise HTTPException(status_code=404, detail=f"{label} not found")
        db.commit()
        return {"message": f"{label} deleted successfully"}

    return router
