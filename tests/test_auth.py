from __future__ import annotations

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "fire-safety-123"


def test_login_sets_http_only_lax_cookie(client, admin_user):
    r = client.post("/api/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert r.status_code == 200, r.text
    assert r.json()["user"]["username"] == ADMIN_USERNAME

    set_cookie = r.headers["set-cookie"].lower()
    assert "nf_session=" in set_cookie
    assert "httponly" in set_cookie
    assert "samesite=lax" in set_cookie
    assert "max-age=86400" in set_cookie


def test_login_rejects_bad_password(client, admin_user):
    r = client.post("/api/login", json={"username": ADMIN_USERNAME, "password": "nope"})
    assert r.status_code == 401
    assert r.json() == {"message": "Invalid credentials"}


def test_login_validation_error_envelope(client):
    r = client.post("/api/login", json={"username": ""})
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Invalid data"
    assert {tuple(e["path"]) for e in body["errors"]} >= {("username",), ("password",)}


def test_me_requires_session(client):
    r = client.get("/api/me")
    assert r.status_code == 401
    assert r.json() == {"message": "Not authenticated"}


def test_me_and_logout(admin_client):
    r = admin_client.get("/api/me")
    assert r.status_code == 200
    assert r.json()["user"]["email"] == "admin@nationalfire.com"
    assert "hashedPassword" not in r.json()["user"]

    r = admin_client.post("/api/logout")
    assert r.status_code == 200
    assert admin_client.get("/api/me").status_code == 401


def test_mutating_routes_need_login(client):
    r = client.post("/api/blogs", json={"title": "T", "content": "C"})
    assert r.status_code == 401
    r = client.post("/api/pages/spring-promo", json={"title": "x", "data": {}, "htmlContent": "", "cssContent": ""})
    assert r.status_code == 401


def test_update_profile_and_password(admin_client, client):
    r = admin_client.put("/api/me", json={"email": "chief@nationalfire.com"})
    assert r.status_code == 200, r.text
    assert r.json()["user"]["email"] == "chief@nationalfire.com"

    r = admin_client.put("/api/me/password", json={"currentPassword": "wrong", "newPassword": "another-pass"})
    assert r.status_code == 400
    assert r.json()["errors"][0]["path"] == ["currentPassword"]

    r = admin_client.put("/api/me/password", json={"currentPassword": ADMIN_PASSWORD, "newPassword": "another-pass"})
    assert r.status_code == 200

    r = client.post("/api/login", json={"username": ADMIN_USERNAME, "password": "another-pass"})
    assert r.status_code == 200
