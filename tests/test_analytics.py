from __future__ import annotations

from sqlalchemy.exc import OperationalError

from app.core.settings import settings
from app.services import site_service


def test_public_reads_are_counted(admin_client, client):
    client.get("/api/products")
    client.get("/api/products", headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"})
    client.get("/api/brands")
    client.post("/api/sub-products/by-ids", json={"ids": [1]})  # not a GET

    r = admin_client.get("/api/analytics")
    assert r.status_code == 200
    analytics = r.json()["analytics"]
    assert analytics["visitsPerPage"]["/api/products"] == 2
    assert analytics["visitsPerPage"]["/api/brands"] == 1
    assert "/api/sub-products/by-ids" not in analytics["visitsPerPage"]
    assert analytics["totalVisits"] == 3

    recent = analytics["recentVisits"]
    assert {v["pageVisited"] for v in recent} == {"/api/products", "/api/brands"}
    assert "203.0.113.7" in {v["ipAddress"] for v in recent}


def test_recent_visits_limit(admin_client, client):
    for _ in range(5):
        client.get("/api/blogs")
    analytics = admin_client.get("/api/analytics", params={"limit": 2}).json()["analytics"]
    assert len(analytics["recentVisits"]) == 2
    assert analytics["totalVisits"] == 5


def test_analytics_is_admin_only(client):
    assert client.get("/api/analytics").status_code == 401


def test_tracking_can_be_disabled(admin_client, client, monkeypatch):
    monkeypatch.setattr(settings, "ANALYTICS_ENABLED", False)
    client.get("/api/products")
    assert admin_client.get("/api/analytics").json()["analytics"]["totalVisits"] == 0


def test_failed_visit_log_does_not_fail_the_read(client, monkeypatch):
    def boom(*args, **kwargs):
        raise OperationalError("INSERT", {}, Exception("db down"))

    monkeypatch.setattr("app.deps.analytics.log_visit", boom)
    r = client.get("/api/products")
    assert r.status_code == 200
    assert r.json() == {"products": []}


def test_summary_service(db):
    site_service.log_visit(db, "/api/blogs", None)
    site_service.log_visit(db, "/api/blogs", "127.0.0.1")
    db.commit()
    summary = site_service.analytics_summary(db, recent=1)
    assert summary["total_visits"] == 2
    assert summary["visits_per_page"] == {"/api/blogs": 2}
    assert len(summary["recent_visits"]) == 1
