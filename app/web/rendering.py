# app/web/rendering.py
# Server-rendered HTML documents: builder preview, stored page preview,
# public page and sub-product detail.
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from fastapi.templating import Jinja2Templates

from app.core.settings import settings

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _render(name: str, **context: Any) -> str:
    return templates.get_template(name).render(site_name=settings.APP_NAME, **context)


def render_builder_preview(title: str, html: str, css: str) -> str:
    """Unsaved editor output wrapped in the baseline responsive CSS."""
    return _render("builder/preview.html", title=title, html=html or "", css=css or "")


def render_stored_preview(title: str, html: str, css: Optional[str]) -> str:
    return _render("builder/stored_preview.html", title=title, html=html, css=css or "")


def render_public_page(title: str, html: Optional[str], css: Optional[str]) -> str:
    return _render("public/page.html", title=title, html=html or "", css=css or "")


def render_sub_product(sub_product: Any) -> str:
    return _render(
        "public/sub_product.html",
        sub_product=sub_product,
        html=sub_product.html_content or "",
        css=sub_product.css_content or "",
    )
