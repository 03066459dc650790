# scripts/db_check.py
from sqlalchemy import inspect, text

from app.db.session import engine

with engine.connect() as conn:
    if engine.dialect.name == "postgresql":
        ver = conn.execute(text("select version()")).scalar_one()
        db = conn.execute(text("select current_database()")).scalar_one()
        print("OK DB:", ver)
        print("Current DB:", db)
    else:
        conn.execute(text("select 1"))
        print("OK DB:", engine.dialect.name)
    print("Tables:", ", ".join(sorted(inspect(conn).get_table_names())) or "(none, run alembic upgrade head)")
