from __future__ import annotations

import pytest

from app.builder.editor import HeadlessEditor
from app.models.catalog import SubProduct
from app.services.sub_product_form import SubProductForm

MANUAL = {
    "name": "Model X Extinguisher",
    "modelNumber": "MX-100",
    "photo": "data:image/png;base64,AAA",
    "description": "6 kg ABC powder",
    "contentType": "manual",
    "content": "<p>Rated 4A:80B:C</p>",
    "specifications": [{"key": "Capacity", "value": "6 kg"}],
    "features": ["Pressure gauge"],
}


def _create(client, **overrides):
    r = client.post("/api/sub-products", json={**MANUAL, **overrides})
    assert r.status_code == 201, r.text
    return r.json()["subProduct"]


# ---------- content type exclusivity ----------
def test_external_create_nulls_manual_fields(admin_client):
    sp = _create(
        admin_client,
        contentType="external",
        externalUrl="https://vendor.example.com/mx",
        htmlContent="<div>stale</div>",
    )
    assert sp["contentType"] == "external"
    assert sp["externalUrl"] == "https://vendor.example.com/mx"
    for key in ("content", "specifications", "features", "pageData", "htmlContent", "cssContent"):
        assert sp[key] is None, key


def test_manual_create_drops_external_url(admin_client):
    sp = _create(admin_client, externalUrl="https://vendor.example.com/leftover")
    assert sp["externalUrl"] is None
    assert sp["content"] == "<p>Rated 4A:80B:C</p>"
    assert sp["specifications"] == [{"key": "Capacity", "value": "6 kg"}]


def test_switching_type_on_update_clears_the_other_side(admin_client):
    sp = _create(admin_client)
    r = admin_client.put(
        f"/api/sub-products/{sp['id']}",
        json={"contentType": "external", "externalUrl": "https://vendor.example.com/mx"},
    )
    assert r.status_code == 200
    updated = r.json()["subProduct"]
    assert r.json()["message"] == "Sub-product updated successfully"
    assert updated["content"] is None and updated["features"] is None
    assert updated["name"] == MANUAL["name"]

    r = admin_client.put(f"/api/sub-products/{sp['id']}", json={"contentType": "manual", "content": "<p>back</p>"})
    back = r.json()["subProduct"]
    assert back["externalUrl"] is None
    assert back["content"] == "<p>back</p>"


def test_external_without_url_is_accepted(admin_client):
    sp = _create(admin_client, contentType="external")
    assert sp["externalUrl"] is None


def test_explicit_null_for_required_column_is_ignored(admin_client):
    sp = _create(admin_client)
    r = admin_client.patch(f"/api/sub-products/{sp['id']}", json={"name": None, "description": None})
    assert r.status_code == 200
    body = r.json()["subProduct"]
    assert body["name"] == MANUAL["name"]
    assert body["description"] is None


# ---------- validation ----------
def test_duplicate_name(admin_client):
    _create(admin_client)
    r = admin_client.post("/api/sub-products", json=MANUAL)
    assert r.status_code == 400
    err = r.json()["errors"][0]
    assert err == {
        "path": ["name"],
        "message": "A sub-product with this name already exists",
        "code": "duplicate_name",
    }

    other = _create(admin_client, name="Other")
    r = admin_client.put(f"/api/sub-products/{other['id']}", json={"name": MANUAL["name"]})
    assert r.status_code == 400


def test_unknown_content_type_is_rejected(admin_client):
    r = admin_client.post("/api/sub-products", json={**MANUAL, "contentType": "video"})
    assert r.status_code == 400
    assert r.json()["errors"][0]["path"] == ["contentType"]


def test_missing_sub_product(admin_client, client):
    assert client.get("/api/sub-products/999").json() == {"message": "Sub-product not found"}
    assert admin_client.put("/api/sub-products/999", json={"name": "x"}).status_code == 404
    assert admin_client.delete("/api/sub-products/999").status_code == 404


# ---------- batch fetch ----------
def test_by_ids_keeps_requested_order(admin_client, client):
    a = _create(admin_client, name="A")
    b = _create(admin_client, name="B")
    c = _create(admin_client, name="C")

    r = client.post("/api/sub-products/by-ids", json={"ids": [c["id"], 999, a["id"], b["id"]]})
    assert r.status_code == 200
    assert [sp["name"] for sp in r.json()["subProducts"]] == ["C", "A", "B"]

    assert client.post("/api/sub-products/by-ids", json={"ids": []}).status_code == 400


# ---------- builder page ----------
def test_builder_page_save_for_manual(admin_client):
    sp = _create(admin_client)
    ed = HeadlessEditor()
    ed.add_block("table")
    r = admin_client.put(
        f"/api/sub-products/{sp['id']}/page",
        json={"data": ed.get_project_data(), "htmlContent": ed.get_html(), "cssContent": ed.get_css()},
    )
    assert r.status_code == 200
    body = r.json()["subProduct"]
    assert body["htmlContent"].startswith("<table")
    assert body["pageData"]["pages"]


def test_builder_page_save_refused_for_external(admin_client):
    sp = _create(admin_client, contentType="external", externalUrl="https://vendor.example.com/mx")
    r = admin_client.put(
        f"/api/sub-products/{sp['id']}/page",
        json={"data": {}, "htmlContent": "<p>x</p>", "cssContent": ""},
    )
    assert r.status_code == 400
    assert r.json()["errors"][0]["path"] == ["contentType"]


# ---------- admin form ----------
def test_form_switch_to_external_clears_content():
    form = SubProductForm(name="MX", photo="p.png", content="<p>rich</p>", features=["a"])
    form.switch_to("external")

    assert form.content is None
    assert "external_url" in form.visible_fields()
    assert "content" not in form.visible_fields()
    assert form.recommended_fields() == ("external_url",)
    assert form.warnings() == ["An external URL is recommended for external sub-products"]

    payload = form.to_payload()
    assert payload["contentType"] == "external"
    assert payload["content"] is None
    assert payload["specifications"] is None
    assert payload["features"] is None


def test_form_switch_back_to_manual():
    form = SubProductForm(name="MX", photo="p.png", content_type="external", external_url="https://v.example.com")
    assert form.warnings() == []
    form.switch_to("manual")
    assert form.recommended_fields() == ()
    assert form.to_payload()["externalUrl"] is None
    with pytest.raises(ValueError):
        form.switch_to("video")


def test_form_payload_round_trips_through_api(admin_client, db):
    form = SubProductForm(name="MX", photo="p.png", content="<p>rich</p>")
    form.switch_to("external")
    form.external_url = "https://vendor.example.com/mx"

    r = admin_client.post("/api/sub-products", json=form.to_payload())
    assert r.status_code == 201

    record = db.get(SubProduct, r.json()["subProduct"]["id"])
    again = SubProductForm.from_record(record)
    assert again.content_type == "external"
    assert again.external_url == "https://vendor.example.com/mx"
    assert again.specifications == [] and again.features == []


def test_generic_update_cannot_touch_builder_artifacts(admin_client):
    sp = _create(admin_client)
    admin_client.put(
        f"/api/sub-products/{sp['id']}/page",
        json={"data": {"pages": []}, "htmlContent": "<p>A</p>", "cssContent": ".a{}"},
    )

    r = admin_client.patch(f"/api/sub-products/{sp['id']}", json={"htmlContent": "<p>B</p>"})
    assert r.status_code == 200
    body = r.json()["subProduct"]
    assert body["htmlContent"] == "<p>A</p>"
    assert body["cssContent"] == ".a{}"
    assert body["pageData"] == {"pages": []}


def test_create_ignores_builder_artifacts(admin_client):
    sp = _create(admin_client, pageData={"pages": []}, htmlContent="<p>x</p>", cssContent=".x{}")
    assert sp["pageData"] is None
    assert sp["htmlContent"] is None
    assert sp["cssContent"] is None
