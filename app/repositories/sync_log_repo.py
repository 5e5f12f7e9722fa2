from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, desc

from app.models.sync_log import StockSyncLog


class SyncLogRepository:
    """
    Repository pour l'historique des actions de stock.
    Les entrées sont ajoutées à la transaction en cours, sans commit.
    """

    def __init__(self, db: Session):
        self.db = db

    def add_log(self, product_sku: Optional[str], action: str, source: str,
                site_url: Optional[str] = None, quantity: Optional[int] = None,
                new_stock: Optional[int] = None, order_id: Optional[str] = None,
                success: bool = True, error_message: Optional[str] = None) -> StockSyncLog:
        """Ajouter une entrée d'historique"""
        entry = StockSyncLog(
            product_sku=product_sku,
            site_url=site_url,
            action=action,
            source=source,
            quantity=quantity,
            new_stock=new_stock,
            order_id=order_id,
            success=success,
            error_message=error_message
        )
        self.db.add(entry)
        return entry

    def get_logs_for_sku(self, sku: str, limit: int = 50) -> List[StockSyncLog]:
        """Dernières entrées pour un SKU"""
        return list(self.db.scalars(
            select(StockSyncLog)
            .where(StockSyncLog.product_sku == sku)
            .order_by(desc(StockSyncLog.id))
            .limit(limit)
        ))
