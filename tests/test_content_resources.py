from __future__ import annotations

from app.services.site_service import DEFAULT_ABOUT_STATS, DEFAULT_CONTACT_INFO


# ---------- blogs ----------
def test_blog_crud(admin_client, client):
    r = admin_client.post(
        "/api/blogs",
        json={"title": "Inspection season", "content": "Check your units", "photos": [{"url": "a.png"}]},
    )
    assert r.status_code == 201
    blog = r.json()["blog"]
    assert blog["photos"] == [{"url": "a.png", "position": "top"}]
    assert r.json()["message"] == "Blog created successfully"

    admin_client.post("/api/blogs", json={"title": "Newer", "content": "..."})
    titles = [b["title"] for b in client.get("/api/blogs").json()["blogs"]]
    assert set(titles) == {"Inspection season", "Newer"}

    r = admin_client.put(f"/api/blogs/{blog['id']}", json={"title": "Renamed"})
    assert r.json()["blog"]["title"] == "Renamed"
    assert r.json()["blog"]["content"] == "Check your units"

    assert admin_client.delete(f"/api/blogs/{blog['id']}").json() == {"message": "Blog deleted successfully"}
    assert client.get(f"/api/blogs/{blog['id']}").status_code == 404


def test_blog_photo_position_is_validated(admin_client):
    r = admin_client.post(
        "/api/blogs", json={"title": "t", "content": "c", "photos": [{"url": "a.png", "position": "left"}]}
    )
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid data"


# ---------- gallery ----------
def test_gallery_keys(admin_client, client):
    r = admin_client.post("/api/gallery", json={"photo": "g.png", "description": "Warehouse install"})
    assert r.status_code == 201
    item = r.json()["galleryItem"]
    assert client.get("/api/gallery").json()["gallery"][0]["id"] == item["id"]


# ---------- portfolio ----------
def test_portfolio_by_category(admin_client, client):
    for title, category in (("Mall", "commercial"), ("Plant", "industrial"), ("Office", "commercial")):
        admin_client.post(
            "/api/portfolio",
            json={"title": title, "category": category, "description": "d", "image": "i.png", "projectDetails": "x"},
        )
    items = client.get("/api/portfolio/category/commercial").json()["portfolioItems"]
    assert [i["title"] for i in items] == ["Mall", "Office"]
    assert items[0]["projectDetails"] == "x"
    assert client.get("/api/portfolio/category/marine").json() == {"portfolioItems": []}


# ---------- customers ----------
def test_active_customers(admin_client, client):
    admin_client.post("/api/customers", json={"name": "Acme", "logo": "a.png", "website": "https://acme.example.com"})
    admin_client.post(
        "/api/customers",
        json={"name": "Gone", "logo": "g.png", "website": "https://gone.example.com", "isActive": False},
    )
    active = client.get("/api/customers/active").json()["customers"]
    assert [c["name"] for c in active] == ["Acme"]
    assert len(client.get("/api/customers").json()["customers"]) == 2


def test_customer_website_must_be_http(admin_client):
    r = admin_client.post("/api/customers", json={"name": "Acme", "logo": "a.png", "website": "acme.example.com"})
    assert r.status_code == 400
    assert r.json()["errors"][0]["path"] == ["website"]


def test_mutations_require_login(client):
    assert client.post("/api/blogs", json={"title": "t", "content": "c"}).status_code == 401
    assert client.post("/api/gallery", json={"photo": "p", "description": "d"}).status_code == 401


# ---------- singletons ----------
def test_contact_info_defaults_and_update(admin_client, client):
    info = client.get("/api/contact-info").json()["contactInfo"]
    assert info["phone"] == DEFAULT_CONTACT_INFO["phone"]
    assert info["email"] == "info@nationalfire.com"

    assert client.put("/api/contact-info", json={"phone": "+1 555 000"}).status_code == 401

    r = admin_client.put("/api/contact-info", json={"phone": "+1 555 000", "whatsapp": None})
    updated = r.json()["contactInfo"]
    assert updated["phone"] == "+1 555 000"
    assert updated["whatsapp"] is None
    assert updated["address"] == DEFAULT_CONTACT_INFO["address"]
    assert updated["id"] == info["id"]


def test_about_stats_defaults_and_update(admin_client, client):
    stats = client.get("/api/about-stats").json()["aboutStats"]
    assert stats["yearsExperience"] == DEFAULT_ABOUT_STATS["years_experience"]
    assert stats["customersTestimonials"] == []

    testimonial = {"name": "Jane", "company": "Acme", "text": "Fast service"}
    r = admin_client.put("/api/about-stats", json={"customersServed": 650, "customersTestimonials": [testimonial]})
    body = r.json()["aboutStats"]
    assert body["customersServed"] == 650
    assert body["productsSupplied"] == 1200
    assert body["customersTestimonials"] == [testimonial]

    assert admin_client.put("/api/about-stats", json={"yearsExperience": -1}).status_code == 400


# ---------- inquiries ----------
def test_inquiry_lifecycle(admin_client, client):
    r = client.post(
        "/api/inquiries",
        json={"name": "Sam", "email": "sam@example.com", "message": "Need a quote"},
    )
    assert r.status_code == 201
    inquiry = r.json()["inquiry"]
    assert inquiry["read"] is False

    assert client.get("/api/inquiries").status_code == 401
    assert len(admin_client.get("/api/inquiries").json()["inquiries"]) == 1

    r = admin_client.put(f"/api/inquiries/{inquiry['id']}/read")
    assert r.json()["inquiry"]["read"] is True

    assert admin_client.delete(f"/api/inquiries/{inquiry['id']}").status_code == 200
    assert admin_client.put(f"/api/inquiries/{inquiry['id']}/read").status_code == 404


def test_inquiry_validation(client):
    r = client.post("/api/inquiries", json={"name": "Sam", "email": "not-an-email", "message": "hi"})
    assert r.status_code == 400

    r = client.post(
        "/api/inquiries",
        json={"name": "Sam", "email": "sam@example.com", "message": "hi", "productId": 42},
    )
    assert r.status_code == 400
    assert r.json()["errors"][0]["code"] == "unknown_product"
