# scripts/create_admin.py
# Usage: python -m scripts.create_admin --username admin --email admin@nationalfire.com --password secret
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# --- Ensure repo root is on sys.path so "app.*" imports work when run as a script
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from app.db.session import SessionLocal
from app.models.auth import User
from app.services.passwords import hash_password


def create_admin(db: Session, username: str, email: str, password: str) -> tuple[User, bool]:
    user = db.scalar(select(User).where(or_(User.username == username, User.email == email)))
    if user:
        return user, False
    user = User(username=username, email=email, hashed_password=hash_password(password))
    db.add(user)
    db.flush()
    return user, True


def main() -> int:
    ap = argparse.ArgumentParser(
        description="Create the dashboard admin user (idempotent).",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    ap.add_argument("--username", default="admin")
    ap.add_argument("--email", default="admin@nationalfire.com")
    ap.add_argument("--password", required=True)
    args = ap.parse_args()

    if len(args.password) < 6:
        print("[ERR] Password must be at least 6 characters")
        return 1

    db: Session = SessionLocal()
    try:
        user, created = create_admin(db, args.username.strip(), args.email.strip().lower(), args.password)
        db.commit()
        print(f"[{'OK' if created else 'SKIP'}] {'Created' if created else 'Exists'}: {user.username} <{user.email}>")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    raise SystemExit(main())
