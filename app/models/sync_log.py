# ===================================
# app/models/sync_log.py
# ===================================
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text
from sqlalchemy.sql import func
from enum import Enum

from app.core.database import Base


class SyncAction(str, Enum):
    """Actions de stock tracées"""
    MANUAL_UPDATE = "manual_update"  # Écrasement manuel
    REDUCE = "reduce"                # Commande passée
    RESTORE = "restore"              # Commande annulée/remboursée


class SyncSource(str, Enum):
    WOOCOMMERCE = "woocommerce"
    MANUAL = "manual"


class StockSyncLog(Base):
    """Historique des actions de stock reçues"""
    __tablename__ = "stock_sync_logs"

    id = Column(Integer, primary_key=True, index=True)
    product_sku = Column(String, nullable=True, index=True)
    site_url = Column(String, nullable=True)

    action = Column(String, nullable=False, index=True)  # SyncAction
    source = Column(String, nullable=False)              # SyncSource

    # Quantités
    quantity = Column(Integer, nullable=True)     # qty demandée (reduce/restore)
    new_stock = Column(Integer, nullable=True)    # stock absolu (manual_update)

    order_id = Column(String, nullable=True)

    # Résultat
    success = Column(Boolean, default=True, nullable=False)
    error_message = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    def __repr__(self):
        return f"<StockSyncLog(id={self.id}, sku='{self.product_sku}', action='{self.action}')>"
