# app/web/public/router.py
# Public HTML views of the stored builder artifacts.
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from sqlalchemy.orm import Session

from app.builder.registry import PageHasNoContent, PageRegistry
from app.db.session import get_db
from app.models.catalog import SubProduct
from app.services import page_service
from app.services.errors import NotFoundError
from app.services.http_cache import (
    apply_no_store,
    apply_public_cache_headers,
    etag_matches,
    not_modified_since,
)
from app.web.rendering import render_public_page, render_sub_product

router = APIRouter(include_in_schema=False)


@router.get("/pages/{slug}", response_class=HTMLResponse)
def public_page(
    slug: str,
    db: Session = Depends(get_db),
    if_none_match: Optional[str] = Header(default=None, alias="If-None-Match"),
    if_modified_since: Optional[str] = Header(default=None, alias="If-Modified-Since"),
):
    page = page_service.get_page(db, slug)
    if not page:
        raise HTTPException(status_code=404, detail="Page not found")

    etag = page_service.page_etag(page)
    # If-None-Match wins over If-Modified-Since
    if if_none_match is not None:
        fresh = etag_matches(if_none_match, etag)
    else:
        fresh = not_modified_since(if_modified_since, page.updated_at)
    if fresh:
        resp = Response(status_code=304)
        apply_public_cache_headers(resp, etag=etag, last_modified=page.updated_at)
        return resp

    resp = HTMLResponse(render_public_page(page.title, page.html_content, page.css_content))
    apply_public_cache_headers(resp, etag=etag, last_modified=page.updated_at)
    return resp


@router.get("/pages/{slug}/preview", response_class=HTMLResponse)
def page_preview(slug: str, db: Session = Depends(get_db)):
    try:
        html = PageRegistry(db).preview(slug)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Page not found")
    except PageHasNoContent as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    resp = HTMLResponse(html)
    apply_no_store(resp)
    return resp


@router.get("/sub-products/{sub_product_id}")
def sub_product_page(sub_product_id: int, db: Session = Depends(get_db)):
    sp = db.get(SubProduct, sub_product_id)
    if not sp:
        raise HTTPException(status_code=404, detail="Sub-product not found")
    if sp.content_type == "external" and sp.external_url:
        return RedirectResponse(url=sp.external_url, status_code=307)
    return HTMLResponse(render_sub_product(sp))
