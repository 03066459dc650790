# app/builder/session.py
# One builder session == one live editor instance, owned and disposed here.
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from sqlalchemy.orm import Session

from app.builder.editor import DEFAULT_DEVICE, Editor, HeadlessEditor, StorageConfig, starter_project
from app.builder.handlers import DocumentLoader, SaveHandler, page_save_handler
from app.web.rendering import render_builder_preview

logger = logging.getLogger(__name__)

SAVE_OK_MESSAGE = "Page saved successfully!"
SAVE_FAILED_MESSAGE = "Failed to save page. Please try again."


class SessionClosedError(RuntimeError):
    pass


@dataclass(frozen=True)
class SaveReport:
    ok: bool
    message: str
    error: Optional[str] = None


class BuilderSession:
    """
    Hosts the editor for a single page (or sub-product) and mediates
    between its in-memory state and storage.

    With `initial_data` the host is the source of truth and the editor is
    seeded right away. Without it the prior document is fetched through
    `loader` the first time the editor is used. Saves are always explicit.
    """

    def __init__(
        self,
        slug: str,
        title: str,
        *,
        db: Optional[Session] = None,
        initial_data: Optional[dict[str, Any]] = None,
        save_handler: Optional[SaveHandler] = None,
        loader: Optional[DocumentLoader] = None,
        editor_factory: Callable[..., Editor] = HeadlessEditor,
    ):
        if save_handler is None and db is None:
            raise ValueError("BuilderSession needs a save_handler or a db session for the default page save")

        self.slug = slug
        self.title = title
        self._loader = loader
        self._save_handler = save_handler or page_save_handler(db, slug, lambda: self.title)

        if initial_data is not None:
            self.storage = StorageConfig(type="simple", autosave=False, autoload=False)
        else:
            self.storage = StorageConfig(type="remote", autosave=False, autoload=False)

        editor = editor_factory(storage=self.storage)
        editor.load(initial_data if initial_data is not None else starter_project())
        editor.set_device(DEFAULT_DEVICE)

        self._editor: Optional[Editor] = editor
        self._loaded = initial_data is not None or loader is None
        self.last_saved_at: Optional[datetime] = None

    # ----- lifecycle -----
    @property
    def closed(self) -> bool:
        return self._editor is None

    def close(self) -> None:
        if self._editor is not None:
            self._editor.destroy()
            self._editor = None
            logger.debug("Builder session for %s closed", self.slug)

    def __enter__(self) -> "BuilderSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ----- editor access -----
    def load(self) -> bool:
        """Fetches the stored document once. Returns True if one was loaded."""
        editor = self._require_open()
        if self._loaded:
            return False
        self._loaded = True
        doc = self._loader(self.slug) if self._loader else None
        if doc:
            editor.load(doc)
            return True
        return False

    def _require_open(self) -> Editor:
        if self._editor is None:
            raise SessionClosedError(f"Builder session for '{self.slug}' is closed")
        return self._editor

    @property
    def editor(self) -> Editor:
        editor = self._require_open()
        if not self._loaded:
            self.load()
        return editor

    def set_device(self, name: str) -> None:
        self.editor.set_device(name)

    def export(self) -> tuple[dict[str, Any], str, str]:
        editor = self.editor
        return editor.get_project_data(), editor.get_html(), editor.get_css()

    # ----- operations -----
    def save(self) -> SaveReport:
        """
        Exports the three artifacts from the same editor state and hands them
        to the save handler. Editor state is kept on both outcomes.
        """
        self._require_open()
        try:
            doc, html, css = self.export()
            self._save_handler(doc, html, css)
        except Exception as exc:
            logger.exception("Failed to save builder content for %s", self.slug)
            return SaveReport(ok=False, message=SAVE_FAILED_MESSAGE, error=str(exc) or exc.__class__.__name__)
        self.last_saved_at = datetime.now(timezone.utc)
        logger.info("Saved builder content for %s", self.slug)
        return SaveReport(ok=True, message=SAVE_OK_MESSAGE)

    def preview(self) -> str:
        """Standalone HTML document of the current, possibly unsaved, state."""
        editor = self.editor
        return render_builder_preview(self.title, editor.get_html(), editor.get_css())
