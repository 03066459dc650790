# app/services/catalog_service.py
# Brands, Products and SubProducts: content-type exclusivity and the
# referential cleanup the database does not do for us (JSON id lists).
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from app.models.catalog import Brand, Product, SubProduct
from app.services.crud_service import apply_patch
from app.services.errors import ConflictError, NotFoundError, ValidationFailed

logger = logging.getLogger(__name__)

# Fields that only mean something for one content type.
MANUAL_FIELDS = ("content", "specifications", "features", "page_data", "html_content", "css_content")
EXTERNAL_FIELDS = ("external_url",)


# -------- Content type rules --------
def apply_content_type_rules(sp: SubProduct) -> None:
    """
    Null the fields of the inactive content type so stale data cannot leak
    back into the UI. Runs on every write.
    """
    if sp.content_type == "external":
        for name in MANUAL_FIELDS:
            setattr(sp, name, None)
    else:
        for name in EXTERNAL_FIELDS:
            setattr(sp, name, None)


def _ensure_unique_name(db: Session, name: str, *, exclude_id: Optional[int] = None) -> None:
    stmt = select(SubProduct.id).where(SubProduct.name == name)
    if exclude_id is not None:
        stmt = stmt.where(SubProduct.id != exclude_id)
    if db.scalar(stmt.limit(1)) is not None:
        raise ConflictError(
            "A sub-product with this name already exists",
            field="name",
            code="duplicate_name",
        )


# -------- SubProducts --------
def create_sub_product(db: Session, values: dict[str, Any]) -> SubProduct:
    _ensure_unique_name(db, values["name"])
    sp = SubProduct(**values)
    apply_content_type_rules(sp)
    db.add(sp)
    db.flush()
    return sp


def update_sub_product(db: Session, sub_product_id: int, patch: dict[str, Any]) -> SubProduct:
    sp = db.get(SubProduct, sub_product_id)
    if not sp:
        raise NotFoundError("Sub-product not found")
    if patch.get("name") is not None and patch["name"] != sp.name:
        _ensure_unique_name(db, patch["name"], exclude_id=sp.id)
    apply_patch(sp, patch)
    apply_content_type_rules(sp)
    db.flush()
    return sp


def save_sub_product_page(db: Session, sub_product_id: int, *, data: dict, html_content: str, css_content: str) -> SubProduct:
    """Builder save for the SubProduct host: the three artifacts move together."""
    sp = db.get(SubProduct, sub_product_id)
    if not sp:
        raise NotFoundError("Sub-product not found")
    if sp.content_type != "manual":
        raise ValidationFailed(
            "Page content can only be designed for manual sub-products",
            errors=[{"path": ["contentType"], "message": "must be 'manual'", "code": "content_type"}],
        )
    sp.page_data = data
    sp.html_content = html_content
    sp.css_content = css_content
    db.flush()
    return sp


def delete_sub_product(db: Session, sub_product_id: int) -> bool:
    sp = db.get(SubProduct, sub_product_id)
    if not sp:
        return False

    # subProductIds is a JSON list: drop the id from every product that lists it
    touched = 0
    for product in db.scalars(select(Product)).all():
        ids = list(product.sub_product_ids or [])
        if sub_product_id in ids:
            product.sub_product_ids = [i for i in ids if i != sub_product_id]
            touched += 1

    db.delete(sp)
    db.flush()
    logger.info("Deleted sub-product %s (detached from %d products)", sub_product_id, touched)
    return True


def get_sub_products_by_ids(db: Session, ids: Sequence[int]) -> list[SubProduct]:
    """Returns sub-products in the order of `ids`; unknown ids are skipped."""
    if not ids:
        return []
    rows = db.scalars(select(SubProduct).where(SubProduct.id.in_(list(ids)))).all()
    by_id = {sp.id: sp for sp in rows}
    return [by_id[i] for i in ids if i in by_id]


# -------- Products --------
def _validate_product_refs(db: Session, values: dict[str, Any]) -> None:
    errors: list[dict[str, Any]] = []

    brand_id = values.get("brand_id")
    if brand_id is not None and db.get(Brand, brand_id) is None:
        errors.append({"path": ["brandId"], "message": f"Brand {brand_id} does not exist", "code": "unknown_brand"})

    ids = values.get("sub_product_ids")
    if ids:
        if len(set(ids)) != len(ids):
            errors.append({"path": ["subProductIds"], "message": "Duplicate sub-product ids", "code": "duplicate_ids"})
        found = set(db.scalars(select(SubProduct.id).where(SubProduct.id.in_(ids))).all())
        missing = [i for i in ids if i not in found]
        if missing:
            errors.append({
                "path": ["subProductIds"],
                "message": f"Unknown sub-product ids: {missing}",
                "code": "unknown_sub_products",
            })

    if errors:
        raise ValidationFailed("Invalid data", errors=errors)


def create_product(db: Session, values: dict[str, Any]) -> Product:
    _validate_product_refs(db, values)
    product = Product(**values)
    db.add(product)
    db.flush()
    return product


def update_product(db: Session, product_id: int, patch: dict[str, Any]) -> Product:
    product = db.get(Product, product_id)
    if not product:
        raise NotFoundError("Product not found")
    _validate_product_refs(db, patch)
    apply_patch(product, patch)
    db.flush()
    return product


def list_products_by_brand(db: Session, brand_id: int) -> Sequence[Product]:
    return db.scalars(select(Product).where(Product.brand_id == brand_id).order_by(Product.id.asc())).all()


# -------- Brands --------
def delete_brand(db: Session, brand_id: int) -> bool:
    brand = db.get(Brand, brand_id)
    if not brand:
        return False
    # soft disassociation: products stay, only the FK goes
    db.execute(update(Product).where(Product.brand_id == brand_id).values(brand_id=None))
    db.delete(brand)
    db.flush()
    return True


# -------- Product detail cards --------
def sub_product_card(sp: SubProduct) -> dict[str, Any]:
    """
    How a sub-product card behaves on the product detail page: external
    sub-products open their vendor URL in a new tab, manual ones route to
    the internal detail page. An external record without a URL yet falls
    back to the internal route.
    """
    if sp.content_type == "external" and sp.external_url:
        href, target, rel = sp.external_url, "_blank", "noopener noreferrer"
    else:
        href, target, rel = f"/sub-products/{sp.id}", "_self", None
    return {
        "id": sp.id,
        "name": sp.name,
        "photo": sp.photo,
        "model_number": sp.model_number,
        "description": sp.description,
        "content_type": sp.content_type,
        "href": href,
        "target": target,
        "rel": rel,
    }


def build_product_detail(db: Session, product_id: int) -> tuple[Product, list[dict[str, Any]]]:
    product = db.get(Product, product_id)
    if not product:
        raise NotFoundError("Product not found")
    subs = get_sub_products_by_ids(db, product.sub_product_ids or [])
    return product, [sub_product_card(sp) for sp in subs]
