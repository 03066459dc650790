"""initial schema: catalog, builder pages, editorial content, site

Revision ID: 5b1d0c7e2a41
Revises:
Create Date: 2026-10-17 10:12:03.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '5b1d0c7e2a41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# JSONB on Postgres, JSON elsewhere
JSON = sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), "postgresql")


def _timestamps(updated: bool = True) -> list:
    cols = [sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)]
    if updated:
        cols.append(sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False))
    return cols


def upgrade():
    # ---------- auth ----------
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(length=80), nullable=False),
        sa.Column("email", sa.String(length=160), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        *_timestamps(updated=False),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # ---------- catalog ----------
    op.create_table(
        "brands",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=160), nullable=False),
        sa.Column("logo", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("photos", JSON, nullable=False),
        sa.Column("sub_product_ids", JSON, nullable=False),
        sa.Column(
            "brand_id",
            sa.Integer(),
            sa.ForeignKey("brands.id", ondelete="SET NULL", name="fk_products_brand_id_brands"),
            nullable=True,
        ),
        *_timestamps(),
    )
    op.create_index("ix_products_brand_id", "products", ["brand_id"])

    content_type = sa.Enum(
        "manual", "external",
        name="sub_product_content_type",
        native_enum=False,
        create_constraint=True,
    )
    op.create_table(
        "sub_products",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("model_number", sa.String(length=120), nullable=True),
        sa.Column("photo", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("content_type", content_type, nullable=False, server_default="manual"),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("external_url", sa.Text(), nullable=True),
        sa.Column("specifications", JSON, nullable=True),
        sa.Column("features", JSON, nullable=True),
        sa.Column("page_data", JSON, nullable=True),
        sa.Column("html_content", sa.Text(), nullable=True),
        sa.Column("css_content", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_sub_products_name", "sub_products", ["name"], unique=True)

    # ---------- builder pages ----------
    op.create_table(
        "pages",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("slug", sa.String(length=160), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("data", JSON, nullable=False),
        sa.Column("html_content", sa.Text(), nullable=True),
        sa.Column("css_content", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_pages_slug", "pages", ["slug"], unique=True)

    # ---------- editorial ----------
    op.create_table(
        "blogs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("photos", JSON, nullable=False),
        *_timestamps(),
    )
    op.create_table(
        "gallery",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("photo", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        *_timestamps(updated=False),
    )
    op.create_table(
        "portfolio",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=120), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("project_details", sa.Text(), nullable=True),
        sa.Column("image", sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_portfolio_category", "portfolio", ["category"])
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("logo", sa.Text(), nullable=False),
        sa.Column("website", sa.String(length=512), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )

    # ---------- site ----------
    op.create_table(
        "contact_info",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("phone", sa.String(length=80), nullable=False),
        sa.Column("email", sa.String(length=160), nullable=False),
        sa.Column("facebook", sa.String(length=512), nullable=True),
        sa.Column("instagram", sa.String(length=512), nullable=True),
        sa.Column("whatsapp", sa.String(length=512), nullable=True),
        sa.Column("linkedin", sa.String(length=512), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        "about_stats",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("years_experience", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("customers_served", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("products_supplied", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("customers_testimonials", JSON, nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        "inquiries",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=160), nullable=False),
        sa.Column("email", sa.String(length=160), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column(
            "product_id",
            sa.Integer(),
            sa.ForeignKey("products.id", ondelete="SET NULL", name="fk_inquiries_product_id_products"),
            nullable=True,
        ),
        sa.Column("read", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(updated=False),
    )
    op.create_table(
        "analytics",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("page_visited", sa.String(length=512), nullable=False),
        sa.Column("ip_address", sa.String(length=64), nullable=True),
        sa.Column("timestamp", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_analytics_page_visited", "analytics", ["page_visited"])
    op.create_index("ix_analytics_timestamp", "analytics", ["timestamp"])


def downgrade():
    op.drop_index("ix_analytics_timestamp", table_name="analytics")
    op.drop_index("ix_analytics_page_visited", table_name="analytics")
    op.drop_table("analytics")
    op.drop_table("inquiries")
    op.drop_table("about_stats")
    op.drop_table("contact_info")

    op.drop_table("customers")
    op.drop_index("ix_portfolio_category", table_name="portfolio")
    op.drop_table("portfolio")
    op.drop_table("gallery")
    op.drop_table("blogs")

    op.drop_index("ix_pages_slug", table_name="pages")
    op.drop_table("pages")

    op.drop_index("ix_sub_products_name", table_name="sub_products")
    op.drop_table("sub_products")
    op.drop_index("ix_products_brand_id", table_name="products")
    op.drop_table("products")
    op.drop_table("brands")

    op.drop_index("ix_users_email", table_name="users")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
