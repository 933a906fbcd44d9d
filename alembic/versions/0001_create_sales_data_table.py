"""create sales_data table

Revision ID: 0001
Revises:
Create Date: 2024-03-21 00:00:00

"""

import sqlalchemy as sa

from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "sales_data",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("product_name", sa.String(length=255), nullable=False),
        sa.Column("q1_sales", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("q2_sales", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("q3_sales", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("q4_sales", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("target", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("sales_data")
