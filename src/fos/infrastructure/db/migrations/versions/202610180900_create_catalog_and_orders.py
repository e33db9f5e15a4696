"""create catalog and order tables

Revision ID: 202610180900
Revises:
Create Date: 2026-10-18 09:00:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "202610180900"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "food_types",
        sa.Column("food_type_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("ingredients", sa.String(length=1000), nullable=True),
        sa.PrimaryKeyConstraint("food_type_id"),
    )

    op.create_table(
        "foods",
        sa.Column("food_type_id", sa.Integer(), nullable=False),
        sa.Column("size", sa.String(length=20), nullable=False),
        sa.Column("price", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.ForeignKeyConstraint(
            ["food_type_id"], ["food_types.food_type_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("food_type_id", "size"),
    )

    op.create_table(
        "orders",
        sa.Column("order_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("date", sa.String(length=10), nullable=False),
        sa.Column("time", sa.String(length=8), nullable=False),
        sa.PrimaryKeyConstraint("order_id"),
    )

    op.create_table(
        "order_details",
        sa.Column("order_id", sa.Integer(), nullable=False),
        sa.Column("food_type_id", sa.Integer(), nullable=False),
        sa.Column("size", sa.String(length=20), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.CheckConstraint("quantity >= 1", name="ck_order_details_quantity_positive"),
        sa.ForeignKeyConstraint(["order_id"], ["orders.order_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["food_type_id", "size"],
            ["foods.food_type_id", "foods.size"],
            name="fk_order_details_food",
        ),
        sa.PrimaryKeyConstraint("order_id", "food_type_id", "size"),
    )


def downgrade() -> None:
    op.drop_table("order_details")
    op.drop_table("orders")
    op.drop_table("foods")
    op.drop_table("food_types")
