from __future__ import annotations

from scripts.create_admin import create_admin
from scripts.seed_site_content import WELCOME_SLUG, seed

from app.services import page_service
from app.services.passwords import verify_password


def test_create_admin_is_idempotent(db, client):
    user, created = create_admin(db, "owner", "owner@nationalfire.com", "s3cret-pw")
    db.commit()
    assert created
    assert verify_password("s3cret-pw", user.hashed_password)

    again, created = create_admin(db, "owner", "other@nationalfire.com", "ignored")
    assert not created
    assert again.id == user.id

    r = client.post("/api/login", json={"username": "owner", "password": "s3cret-pw"})
    assert r.status_code == 200


def test_seed_site_content(db, client):
    report = seed(db)
    assert report is not None and report.ok

    page = page_service.get_page(db, WELCOME_SLUG)
    assert "National Fire" in page.html_content
    assert "Fire safety equipment you can trust" in page.html_content
    assert client.get("/api/contact-info").json()["contactInfo"]["email"] == "info@nationalfire.com"

    assert seed(db) is None
