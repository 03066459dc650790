# app/utils/slugs.py
import re

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
_SLUG_RE = re.compile(SLUG_PATTERN)
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """'Spring Promo 2025!' -> 'spring-promo-2025'"""
    return _NON_ALNUM.sub("-", (title or "").lower()).strip("-")


def is_valid_slug(value: str) -> bool:
    return bool(value) and _SLUG_RE.match(value) is not None
