# scripts/set_password.py
# Usage: python -m scripts.set_password admin new-secret
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.session import SessionLocal
from app.models.auth import User
from app.services.passwords import hash_password


def run(username: str, plain: str) -> int:
    db: Session = SessionLocal()
    try:
        u = db.scalar(select(User).where(User.username == username))
        if not u:
            print(f"[SKIP] User not found: {username}")
            return 1
        u.hashed_password = hash_password(plain)
        db.commit()
        print(f"[OK] Set password for {username}")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Reset a dashboard user's password.")
    ap.add_argument("username")
    ap.add_argument("password")
    args = ap.parse_args()
    raise SystemExit(run(args.username, args.password))
