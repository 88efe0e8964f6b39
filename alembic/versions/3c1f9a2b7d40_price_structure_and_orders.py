"""price structure and orders tables

Revision ID: 3c1f9a2b7d40
Revises:
Create Date: 2026-10-12 09:41:03.118204

Creates the catalog snapshot table the pricing engine reads and the orders
table the pricing flow writes totals onto. Idempotent — skips tables that
Base.metadata.create_all() already made.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '3c1f9a2b7d40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _table_exists(table_name):
    """Check if a table exists."""
    bind = op.get_bind()
    insp = inspect(bind)
    return table_name in insp.get_table_names()


def upgrade() -> None:
    if not _table_exists("price_structure"):
        op.create_table(
            "price_structure",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("category", sa.String(), nullable=False),
            sa.Column("subcategory", sa.String(), nullable=True),
            sa.Column("item_name", sa.String(), nullable=False),
            sa.Column("unit_type", sa.String(), nullable=False),
            sa.Column("base_price", sa.Float(), nullable=False),
            sa.Column("notes", sa.Text(), nullable=True),
            sa.Column("updated_at", sa.DateTime(), nullable=True),
        )
        op.create_index("ix_price_structure_category", "price_structure", ["category"])

    if not _table_exists("orders"):
        op.create_table(
            "orders",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("order_number", sa.String(), nullable=False, unique=True),
            sa.Column("description", sa.Text(), nullable=False),
            sa.Column("dimensions", sa.String(), nullable=True),
            sa.Column("frame_style", sa.String(), nullable=True),
            sa.Column("mat_color", sa.String(), nullable=True),
            sa.Column("glazing", sa.String(), nullable=True),
            sa.Column("total_amount", sa.Float(), nullable=True),
            sa.Column("deposit_amount", sa.Float(), nullable=True),
            sa.Column("status", sa.String(), nullable=True),
            sa.Column("notes", sa.Text(), nullable=True),
            sa.Column("created_at", sa.DateTime(), nullable=True),
            sa.Column("updated_at", sa.DateTime(), nullable=True),
        )


def downgrade() -> None:
    if _table_exists("orders"):
        op.drop_table("orders")
    if _table_exists("price_structure"):
        op.drop_table("price_structure")
