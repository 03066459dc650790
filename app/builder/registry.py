# app/builder/registry.py
# Admin-side page registry: list, create, edit, preview and delete pages.
from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from sqlalchemy.orm import Session

from app.builder.editor import Editor, HeadlessEditor
from app.builder.handlers import page_document_loader
from app.builder.session import BuilderSession
from app.models.content import Page
from app.services import page_service
from app.services.errors import ConflictError, NotFoundError, ValidationFailed
from app.utils.slugs import slugify
from app.web.rendering import render_stored_preview

logger = logging.getLogger(__name__)

NO_CONTENT_MESSAGE = "This page doesn't have any content yet."


class SlugTakenError(ConflictError):
    def __init__(self, slug: str):
        super().__init__("A page with this slug already exists", field="slug", code="slug_taken")
        self.slug = slug


class PageHasNoContent(ValueError):
    def __init__(self, slug: str):
        super().__init__(NO_CONTENT_MESSAGE)
        self.slug = slug


class PageRegistry:
    def __init__(self, db: Session, *, editor_factory: Callable[..., Editor] = HeadlessEditor):
        self.db = db
        self.editor_factory = editor_factory

    def list_pages(self) -> Sequence[Page]:
        return page_service.list_pages(self.db)

    def propose_slug(self, title: str) -> str:
        return slugify(title)

    def _get(self, slug: str) -> Page:
        page = page_service.get_page(self.db, slug)
        if page is None:
            raise NotFoundError("Page not found")
        return page

    def begin_create(self, title: str, slug: Optional[str] = None) -> BuilderSession:
        """
        Checks the slug against the current listing and opens an empty
        builder session. Nothing is stored until the session saves.
        """
        title = (title or "").strip()
        slug = (slug or "").strip() or self.propose_slug(title)
        errors = []
        if not title:
            errors.append({"path": ["title"], "message": "Title is required", "code": "required"})
        if not slug:
            errors.append({"path": ["slug"], "message": "Slug is required", "code": "required"})
        if errors:
            raise ValidationFailed("Please provide both title and slug", errors=errors)
        page_service.validate_slug(slug)

        if slug in {p.slug for p in self.list_pages()}:
            raise SlugTakenError(slug)

        return BuilderSession(slug, title, db=self.db, editor_factory=self.editor_factory)

    def begin_edit(self, slug: str) -> BuilderSession:
        page = self._get(slug)
        return BuilderSession(
            page.slug,
            page.title,
            db=self.db,
            loader=page_document_loader(self.db),
            editor_factory=self.editor_factory,
        )

    def preview(self, slug: str) -> str:
        page = self._get(slug)
        if not page_service.has_content(page):
            raise PageHasNoContent(slug)
        return render_stored_preview(page.title, page.html_content or "", page.css_content)

    def delete(self, slug: str, confirm: Callable[[str], bool]) -> bool:
        """Asks once; returns False when the admin declines."""
        page = self._get(slug)
        if not confirm(f'Are you sure you want to delete "{page.title}"?'):
            return False
        page_service.delete_page(self.db, slug)
        self.db.commit()
        logger.info("Page %s deleted from registry", slug)
        return True
