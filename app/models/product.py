# ===================================
# app/models/product.py
# ===================================
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Index
from sqlalchemy.sql import func
from enum import Enum

from app.core.database import Base


class InventoryType(str, Enum):
    """Types d'inventaire (seul Global est géré par la synchronisation)"""
    GLOBAL = "Global"


class Product(Base):
    """
    Produit du catalogue partagé.

    Le SKU n'est pas unique d'un type d'inventaire à l'autre : toute écriture
    filtre sur le SKU et sur le type d'inventaire.
    """
    __tablename__ = "products"
    __table_args__ = (
        Index("ix_products_sku_inventory_type", "sku", "inventory_type"),
    )

    id = Column(Integer, primary_key=True, index=True)
    sku = Column(String, nullable=False)
    name = Column(String, nullable=True)
    inventory_type = Column(String, default=InventoryType.GLOBAL.value, nullable=False)
    is_bundle = Column("isBundle", Boolean, default=False, nullable=False)

    # Quantité stockée en texte, isInStock en dépend
    stock_quantity = Column(String, default="0", nullable=False)
    is_in_stock = Column("isInStock", Boolean, default=False, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<Product(id={self.id}, sku='{self.sku}', type='{self.inventory_type}', stock={self.stock_quantity})>"
