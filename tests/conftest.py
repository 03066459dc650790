# tests/conftest.py
from __future__ import annotations

import os

# settings need a URL at import time; tests never touch that engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models.auth import User
from app.services.passwords import hash_password

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "fire-safety-123"


@pytest.fixture(scope="function")
def engine():
    """A fresh in-memory database per test; StaticPool keeps the single connection."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    try:
        yield eng
    finally:
        Base.metadata.drop_all(eng)
        eng.dispose()


@pytest.fixture(scope="function")
def db(engine) -> Session:
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def _override_get_db(db: Session):
    """Every endpoint uses the session of the running test."""
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def client() -> TestClient:
    # one client per test: the session cookie must not leak between tests
    return TestClient(app)


@pytest.fixture
def admin_user(db: Session) -> User:
    user = User(username=ADMIN_USERNAME, email="admin@nationalfire.com", hashed_password=hash_password(ADMIN_PASSWORD))
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def admin_client(admin_user: User) -> TestClient:
    c = TestClient(app)
    r = c.post("/api/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert r.status_code == 200, r.text
    return c
