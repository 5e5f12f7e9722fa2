"""
Models package initialization.
This file imports all models to make them available to Alembic for autogeneration.
"""

# IMPORTANT: Utiliser la MÊME Base que celle de database.py
from app.core.database import Base

# Import all your models here so they are registered with Base.metadata
from .site import WooCommerceSite, SyncStatus  # Boutiques connectées
from .product import Product, InventoryType  # Catalogue partagé
from .sync_log import StockSyncLog, SyncAction, SyncSource  # Historique de stock

__all__ = [
    'Base',
    'WooCommerceSite',
    'SyncStatus',
    'Product',
    'InventoryType',
    'StockSyncLog',
    'SyncAction',
    'SyncSource',
]
