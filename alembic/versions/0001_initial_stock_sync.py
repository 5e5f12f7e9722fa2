"""initial stock sync tables

Revision ID: 0001
Revises:
Create Date: 2026-10-18 09:00:00

"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "woocommerce_sites",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("site_url", sa.String(), nullable=False),
        sa.Column("site_name", sa.String(), nullable=True),
        sa.Column("consumer_key", sa.String(), nullable=True),
        sa.Column("consumer_secret", sa.String(), nullable=True),
        sa.Column("api_key", sa.String(), nullable=False),
        sa.Column("is_primary", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("sync_status", sa.String(), nullable=False, server_default="pending"),
        sa.Column("last_sync", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_woocommerce_sites_id", "woocommerce_sites", ["id"])
    op.create_index("ix_woocommerce_sites_site_url", "woocommerce_sites", ["site_url"], unique=True)
    op.create_index("ix_woocommerce_sites_api_key", "woocommerce_sites", ["api_key"], unique=True)
    op.create_index("ix_woocommerce_sites_created_at", "woocommerce_sites", ["created_at"])

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("sku", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=True),
        sa.Column("inventory_type", sa.String(), nullable=False, server_default="Global"),
        sa.Column("isBundle", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("stock_quantity", sa.String(), nullable=False, server_default="0"),
        sa.Column("isInStock", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_products_id", "products", ["id"])
    op.create_index("ix_products_sku_inventory_type", "products", ["sku", "inventory_type"])

    op.create_table(
        "stock_sync_logs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("product_sku", sa.String(), nullable=True),
        sa.Column("site_url", sa.String(), nullable=True),
        sa.Column("action", sa.String(), nullable=False),
        sa.Column("source", sa.String(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=True),
        sa.Column("new_stock", sa.Integer(), nullable=True),
        sa.Column("order_id", sa.String(), nullable=True),
        sa.Column("success", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("error_message", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_stock_sync_logs_id", "stock_sync_logs", ["id"])
    op.create_index("ix_stock_sync_logs_product_sku", "stock_sync_logs", ["product_sku"])
    op.create_index("ix_stock_sync_logs_action", "stock_sync_logs", ["action"])
    op.create_index("ix_stock_sync_logs_created_at", "stock_sync_logs", ["created_at"])


def downgrade() -> None:
    op.drop_table("stock_sync_logs")
    op.drop_table("products")
    op.drop_table("woocommerce_sites")
