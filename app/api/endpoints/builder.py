# app/api/endpoints/builder.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from app.builder.blocks import BLOCKS
from app.builder.editor import DEFAULT_DEVICE, DEVICES
from app.deps.auth import require_admin
from app.models.auth import User
from app.schemas.content import PreviewIn
from app.services.http_cache import apply_no_store
from app.web.rendering import render_builder_preview

router = APIRouter(tags=["builder"])


@router.get("/config")
def builder_config(_: User = Depends(require_admin)):
    """Devices and blocks the admin UI offers in the editor."""
    return {
        "defaultDevice": DEFAULT_DEVICE,
        "devices": [
            {"name": d.name, "width": d.width, "widthMedia": d.width_media, "mediaText": d.media_text}
            for d in DEVICES
        ],
        "blocks": [{"id": b.id, "label": b.label, "category": b.category} for b in BLOCKS.values()],
    }


@router.post("/preview", response_class=HTMLResponse)
def builder_preview(payload: PreviewIn, _: User = Depends(require_admin)):
    """Renders posted, unsaved markup. Never reads or writes storage."""
    resp = HTMLResponse(render_builder_preview(payload.title, payload.html_content, payload.css_content))
    apply_no_store(resp)
    return resp
