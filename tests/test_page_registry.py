from __future__ import annotations

import pytest

from app.builder.registry import NO_CONTENT_MESSAGE, PageHasNoContent, PageRegistry, SlugTakenError
from app.services import page_service
from app.services.errors import NotFoundError, ValidationFailed


def _create(registry: PageRegistry, title: str, slug: str | None = None, text: str = "Hello"):
    with registry.begin_create(title, slug) as s:
        s.editor.add_block("text", content=text)
        assert s.save().ok


def test_propose_slug_from_title(db):
    assert PageRegistry(db).propose_slug("Spring Promo 2024!") == "spring-promo-2024"


def test_spring_promo_flow_shows_up_in_listing(db, client):
    registry = PageRegistry(db)
    _create(registry, "Spring Promo")

    assert [p.slug for p in registry.list_pages()] == ["spring-promo"]

    r = client.get("/api/pages")
    assert r.status_code == 200
    pages = r.json()["pages"]
    assert pages[0]["slug"] == "spring-promo"
    assert pages[0]["title"] == "Spring Promo"
    assert "Hello" in pages[0]["htmlContent"]
    assert pages[0]["cssContent"].startswith("*{box-sizing:border-box;}")


def test_begin_create_requires_title_and_slug(db):
    with pytest.raises(ValidationFailed) as exc:
        PageRegistry(db).begin_create("   ", "")
    assert str(exc.value) == "Please provide both title and slug"


def test_begin_create_rejects_bad_slug(db):
    with pytest.raises(ValidationFailed) as exc:
        PageRegistry(db).begin_create("Promo", "Spring Promo")
    assert exc.value.errors[0]["code"] == "invalid_slug"


def test_begin_create_rejects_taken_slug_before_opening_editor(db):
    registry = PageRegistry(db)
    _create(registry, "Spring Promo", "spring-promo")

    with pytest.raises(SlugTakenError) as exc:
        registry.begin_create("Another promo", "spring-promo")
    assert exc.value.errors[0]["code"] == "slug_taken"
    assert exc.value.errors[0]["path"] == ["slug"]


def test_begin_create_stores_nothing_until_save(db):
    s = PageRegistry(db).begin_create("Draft", "draft")
    s.editor.add_block("text")
    s.close()
    assert page_service.get_page(db, "draft") is None


def test_begin_edit_unknown_page(db):
    with pytest.raises(NotFoundError):
        PageRegistry(db).begin_edit("missing")


def test_preview_of_stored_page(db):
    registry = PageRegistry(db)
    _create(registry, "About", "about", text="Since 1989")
    html = registry.preview("about")
    assert "Since 1989" in html
    assert "<title>About</title>" in html


def test_preview_of_page_without_content(db):
    page_service.upsert_page(db, slug="empty", title="Empty", data={}, html_content="  ", css_content="")
    db.commit()
    with pytest.raises(PageHasNoContent) as exc:
        PageRegistry(db).preview("empty")
    assert str(exc.value) == NO_CONTENT_MESSAGE


def test_delete_asks_and_respects_the_answer(db):
    registry = PageRegistry(db)
    _create(registry, "Spring Promo", "spring-promo")

    prompts = []

    def decline(msg):
        prompts.append(msg)
        return False

    assert registry.delete("spring-promo", decline) is False
    assert prompts == ['Are you sure you want to delete "Spring Promo"?']
    assert page_service.get_page(db, "spring-promo") is not None

    assert registry.delete("spring-promo", lambda _msg: True) is True
    assert registry.list_pages() == []
