from __future__ import annotations

from app.builder.editor import HeadlessEditor
from app.core.settings import settings


def _artifacts(text="Hello"):
    ed = HeadlessEditor()
    ed.add_block("text", content=text)
    return {"data": ed.get_project_data(), "htmlContent": ed.get_html(), "cssContent": ed.get_css()}


def test_save_requires_admin(client):
    r = client.post("/api/pages/promo", json={"title": "Promo", **_artifacts()})
    assert r.status_code == 401
    assert r.json() == {"message": "Not authenticated"}


def test_upsert_creates_then_updates(admin_client):
    r = admin_client.post("/api/pages/spring-promo", json={"title": "Spring Promo", **_artifacts()})
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["message"] == "Page created successfully"
    assert body["page"]["slug"] == "spring-promo"
    assert r.headers["etag"].startswith('"')

    r = admin_client.post("/api/pages/spring-promo", json={"title": "Spring Promo", **_artifacts("Updated")})
    assert r.status_code == 200
    assert r.json()["message"] == "Page updated successfully"
    assert "Updated" in r.json()["page"]["htmlContent"]

    assert len(admin_client.get("/api/pages").json()["pages"]) == 1


def test_get_page_and_etag(admin_client, client):
    saved = admin_client.post("/api/pages/about", json={"title": "About", **_artifacts()})
    r = client.get("/api/pages/about")
    assert r.status_code == 200
    assert r.headers["etag"] == saved.headers["etag"]
    page = r.json()["page"]
    assert set(page) >= {"id", "slug", "title", "data", "htmlContent", "cssContent", "createdAt", "updatedAt"}

    assert client.get("/api/pages/missing").status_code == 404


def test_if_match_guards_concurrent_edits(admin_client):
    first = admin_client.post("/api/pages/promo", json={"title": "Promo", **_artifacts("v1")})
    etag = first.headers["etag"]

    ok = admin_client.post(
        "/api/pages/promo", json={"title": "Promo", **_artifacts("v2")}, headers={"If-Match": etag}
    )
    assert ok.status_code == 200

    stale = admin_client.post(
        "/api/pages/promo", json={"title": "Promo", **_artifacts("v3")}, headers={"If-Match": etag}
    )
    assert stale.status_code == 412
    assert "v2" in admin_client.get("/api/pages/promo").json()["page"]["htmlContent"]

    missing = admin_client.post(
        "/api/pages/new-one", json={"title": "New", **_artifacts()}, headers={"If-Match": etag}
    )
    assert missing.status_code == 412


def test_oversized_document_is_rejected_and_nothing_written(admin_client, monkeypatch):
    admin_client.post("/api/pages/promo", json={"title": "Promo", **_artifacts("small")})
    monkeypatch.setattr(settings, "MAX_PAGE_DATA_KB", 1)

    big = _artifacts("x" * 4000)
    r = admin_client.post("/api/pages/promo", json={"title": "Promo", **big})
    assert r.status_code == 413
    assert r.json()["message"].startswith("Payload too large")

    page = admin_client.get("/api/pages/promo").json()["page"]
    assert "small" in page["htmlContent"]


def test_invalid_slug_and_mismatch(admin_client):
    r = admin_client.post("/api/pages/Bad_Slug", json={"title": "Bad", **_artifacts()})
    assert r.status_code == 400
    assert r.json()["errors"][0]["code"] == "invalid_slug"

    r = admin_client.post("/api/pages/promo", json={"slug": "other", "title": "Promo", **_artifacts()})
    assert r.status_code == 400
    assert r.json()["errors"][0]["code"] == "slug_mismatch"


def test_missing_artifact_is_a_validation_error(admin_client):
    payload = {"title": "Promo", **_artifacts()}
    del payload["cssContent"]
    r = admin_client.post("/api/pages/promo", json=payload)
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid data"
    assert ["cssContent"] in [e["path"] for e in r.json()["errors"]]


def test_suggest_slug(admin_client):
    r = admin_client.get("/api/pages/suggest-slug", params={"title": "Spring Promo!"})
    assert r.json() == {"slug": "spring-promo", "available": True, "proposed": "spring-promo"}

    admin_client.post("/api/pages/spring-promo", json={"title": "Spring Promo", **_artifacts()})
    r = admin_client.get("/api/pages/suggest-slug", params={"title": "Spring Promo!"})
    assert r.json() == {"slug": "spring-promo-2", "available": True, "proposed": "spring-promo"}


def test_delete_page(admin_client):
    admin_client.post("/api/pages/promo", json={"title": "Promo", **_artifacts()})
    r = admin_client.delete("/api/pages/promo")
    assert r.status_code == 200
    assert r.json() == {"message": "Page deleted successfully"}
    assert admin_client.delete("/api/pages/promo").status_code == 404


def test_builder_config_and_preview(admin_client, client):
    assert client.get("/api/builder/config").status_code == 401

    cfg = admin_client.get("/api/builder/config").json()
    assert cfg["defaultDevice"] == "Mobile"
    assert [d["name"] for d in cfg["devices"]] == ["Mobile", "Tablet", "Desktop"]
    assert {"text", "image", "two-columns", "three-columns", "table"} <= {b["id"] for b in cfg["blocks"]}

    r = admin_client.post(
        "/api/builder/preview",
        json={"title": "Draft", "htmlContent": "<p>unsaved</p>", "cssContent": "p{color:red;}"},
    )
    assert r.status_code == 200
    assert r.headers["cache-control"] == "no-store"
    assert "<p>unsaved</p>" in r.text
    assert "p{color:red;}" in r.text
    assert admin_client.get("/api/pages").json()["pages"] == []


def test_route_names_are_reserved_slugs(admin_client):
    r = admin_client.post("/api/pages/suggest-slug", json={"title": "Suggest slug", **_artifacts()})
    assert r.status_code == 400
    assert r.json()["errors"][0]["code"] == "reserved_slug"

    r = admin_client.get("/api/pages/suggest-slug", params={"title": "Suggest Slug"})
    assert r.json()["slug"] == "suggest-slug-2"
