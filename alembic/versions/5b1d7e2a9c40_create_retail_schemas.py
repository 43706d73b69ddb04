"""create_retail_schemas

Revision ID: 5b1d7e2a9c40
Revises:
Create Date: 2026-10-19 09:12:41.518204
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '5b1d7e2a9c40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


SCHEMAS = ("entity", "product", "purchase", "sale")

employee_role = postgresql.ENUM(
    "manager", "cashier", "stock_keeper", "sales_rep",
    name="employee_role",
    schema="entity",
    create_type=False,
)

sale_status = postgresql.ENUM(
    "Pending", "Completed", "Canceled",
    name="sale_status",
    schema="sale",
    create_type=False,
)


def upgrade() -> None:
    """Upgrade schema."""

    for schema in SCHEMAS:
        op.execute(f"CREATE SCHEMA IF NOT EXISTS {schema}")

    employee_role.create(op.get_bind(), checkfirst=True)
    sale_status.create(op.get_bind(), checkfirst=True)

    # ENTITY
    op.create_table(
        "client",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("email", sa.String(), nullable=True, unique=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("address", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        schema="entity",
    )

    op.create_table(
        "employee",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("email", sa.String(), nullable=True, unique=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("role", employee_role, nullable=True),
        sa.Column("hire_date", sa.Date(), nullable=False),
        schema="entity",
    )

    # PRODUCT
    op.create_table(
        "product",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("stock", sa.Integer(), server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        schema="product",
    )

    op.create_table(
        "inventory",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "product_id",
            sa.Integer(),
            sa.ForeignKey("product.product.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("time", sa.DateTime(timezone=True), server_default=sa.func.now()),
        schema="product",
    )

    # PURCHASE
    op.create_table(
        "purchase",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.Column("price", sa.Numeric(12, 2), nullable=True),
        sa.Column("payment_method", sa.String(), nullable=True),
        schema="purchase",
    )

    # SALE
    op.create_table(
        "sale",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("client_id", sa.Integer(), sa.ForeignKey("entity.client.id"), nullable=False),
        sa.Column("employee_id", sa.Integer(), sa.ForeignKey("entity.employee.id"), nullable=False),
        sa.Column("total_amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("status", sale_status, server_default="Pending"),
        sa.Column("sale_date", sa.DateTime(timezone=True), server_default=sa.func.now()),
        schema="sale",
    )

    op.create_table(
        "sale_item",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("sale_id", sa.Integer(), sa.ForeignKey("sale.sale.id"), nullable=False),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("product.product.id"), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        schema="sale",
    )

    # INDEXES
    op.create_index("ix_entity_client_id", "client", ["id"], schema="entity")
    op.create_index("ix_entity_employee_id", "employee", ["id"], schema="entity")
    op.create_index("ix_product_product_id", "product", ["id"], schema="product")
    op.create_index("ix_product_inventory_id", "inventory", ["id"], schema="product")
    op.create_index("ix_product_inventory_product_id", "inventory", ["product_id"], schema="product")
    op.create_index("ix_purchase_purchase_id", "purchase", ["id"], schema="purchase")
    op.create_index("ix_sale_sale_id", "sale", ["id"], schema="sale")
    op.create_index("ix_sale_sale_client_id", "sale", ["client_id"], schema="sale")
    op.create_index("ix_sale_sale_employee_id", "sale", ["employee_id"], schema="sale")
    op.create_index("ix_sale_sale_sale_date", "sale", ["sale_date"], schema="sale")
    op.create_index("ix_sale_sale_item_id", "sale_item", ["id"], schema="sale")
    op.create_index("ix_sale_sale_item_sale_id", "sale_item", ["sale_id"], schema="sale")
    op.create_index("ix_sale_sale_item_product_id", "sale_item", ["product_id"], schema="sale")


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("sale_item", schema="sale")
    op.drop_table("sale", schema="sale")
    op.drop_table("purchase", schema="purchase")
    op.drop_table("inventory", schema="product")
    op.drop_table("product", schema="product")
    op.drop_table("employee", schema="entity")
    op.drop_table("client", schema="entity")

    sale_status.drop(op.get_bind(), checkfirst=True)
    employee_role.drop(op.get_bind(), checkfirst=True)

    for schema in reversed(SCHEMAS):
        op.execute(f"DROP SCHEMA IF EXISTS {schema}")
