# scripts/reset_db.py
from __future__ import annotations
from sqlalchemy import text

from app.db.base import Base
from app.db.session import engine
import app.models  # noqa: F401

# Drops EVERYTHING. Local development only.
if engine.dialect.name == "postgresql":
    with engine.begin() as conn:
        conn.execute(text("DROP SCHEMA public CASCADE;"))
        conn.execute(text("CREATE SCHEMA public;"))
    print("[OK] public schema dropped & recreated (run: alembic upgrade head)")
else:
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    print("[OK] tables dropped & recreated")
