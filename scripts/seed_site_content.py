# scripts/seed_site_content.py
# Seeds the contact-info / about-stats singletons and a welcome page.
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy.orm import Session

from app.builder.session import BuilderSession, SaveReport
from app.db.session import SessionLocal
from app.services import page_service, site_service

WELCOME_SLUG = "welcome"


def seed(db: Session) -> SaveReport | None:
    """Idempotent. Returns the welcome page save report, or None when it already exists."""
    site_service.get_contact_info(db)
    site_service.get_about_stats(db)
    db.commit()

    if page_service.get_page(db, WELCOME_SLUG):
        return None
    with BuilderSession(WELCOME_SLUG, "Welcome", db=db) as session:
        session.editor.add_block("hero-section", title="National Fire", subtitle="Fire safety equipment you can trust")
        session.editor.add_block("feature-grid")
        return session.save()


def main() -> None:
    db: Session = SessionLocal()
    try:
        report = seed(db)
        print("[OK] contact info & about stats")
        if report is None:
            print(f"[SKIP] page '{WELCOME_SLUG}' exists")
        else:
            print(f"[{'OK' if report.ok else 'ERR'}] page '{WELCOME_SLUG}': {report.message}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
