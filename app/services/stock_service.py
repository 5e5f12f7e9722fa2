# ===================================
# app/services/stock_service.py
# ===================================

import logging
from typing import Optional
from sqlalchemy.orm import Session

from app.models.sync_log import SyncAction, SyncSource
from app.repositories.product_repo import ProductRepository
from app.repositories.sync_log_repo import SyncLogRepository

logger = logging.getLogger(__name__)

NON_GLOBAL_MESSAGE = "Non-global product - no action taken"


class StockService:
    """
    Service pour les mouvements de stock reçus des boutiques.

    Chaque opération est une seule tentative : le mouvement et son entrée
    d'historique sont validés dans la même transaction.
    """

    def __init__(self, db: Session):
        self.db = db
        self.product_repo = ProductRepository(db)
        self.log_repo = SyncLogRepository(db)

    def _outcome(self, updated: int) -> dict:
        """Résultat à tracer : aucune ligne touchée = produit non Global"""
        if updated == 0:
            return {"success": False, "error_message": NON_GLOBAL_MESSAGE}
        return {"success": True}

    def manual_update(self, sku: str, stock: int, site_url: Optional[str] = None) -> int:
        """Écraser le stock d'un produit Global (dernier écrit gagnant)"""
        updated = self.product_repo.set_stock(sku, stock)
        self.log_repo.add_log(
            product_sku=sku,
            action=SyncAction.MANUAL_UPDATE.value,
            source=SyncSource.MANUAL.value,
            site_url=site_url,
            new_stock=stock,
            **self._outcome(updated)
        )
        self.db.commit()

        logger.info(f"Stock manuel {sku} -> {stock} ({updated} ligne(s))")
        return updated

    def reduce(self, sku: str, qty: int, order_id: Optional[str] = None,
               site_url: Optional[str] = None) -> bool:
        """
        Réduire le stock d'un produit Global non-bundle.
        Retourne False (sans mouvement) si le produit n'est pas éligible.
        """
        product = self.product_repo.get_reducible_product(sku)

        if not product:
            # Bundles et produits non Global : pas de réduction automatique
            self.log_repo.add_log(
                product_sku=sku,
                action=SyncAction.REDUCE.value,
                source=SyncSource.WOOCOMMERCE.value,
                site_url=site_url,
                quantity=qty,
                order_id=order_id,
                success=False,
                error_message=NON_GLOBAL_MESSAGE
            )
            self.db.commit()
            logger.info(f"Réduction ignorée pour {sku}: produit non éligible")
            return False

        self.product_repo.reduce_product_stock(sku, qty)
        self.log_repo.add_log(
            product_sku=sku,
            action=SyncAction.REDUCE.value,
            source=SyncSource.WOOCOMMERCE.value,
            site_url=site_url,
            quantity=qty,
            order_id=order_id
        )
        self.db.commit()

        logger.info(f"Stock {sku} réduit de {qty}")
        return True

    def restore(self, sku: str, qty: int, order_id: Optional[str] = None,
                site_url: Optional[str] = None) -> int:
        """Réincrémenter le stock (commande annulée ou remboursée), sans contrôle d'éligibilité"""
        updated = self.product_repo.restore_product_stock(sku, qty)
        self.log_repo.add_log(
            product_sku=sku,
            action=SyncAction.RESTORE.value,
            source=SyncSource.WOOCOMMERCE.value,
            site_url=site_url,
            quantity=qty,
            order_id=order_id,
            **self._outcome(updated)
        )
        self.db.commit()

        logger.info(f"Stock {sku} restauré de {qty} ({updated} ligne(s))")
        return updated
