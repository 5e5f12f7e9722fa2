from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, update, cast, func, Integer, String

from app.models.product import Product, InventoryType


class ProductRepository:
    """
    Repository pour le stock des produits Global.

    Les mouvements de stock sont de simples UPDATE atomiques : la nouvelle
    quantité est calculée par la base à partir de la valeur courante de la
    ligne, jamais lue puis réécrite par l'application.
    """

    def __init__(self, db: Session):
        self.db = db

    def _global_sku(self, sku: str):
        return (Product.sku == sku, Product.inventory_type == InventoryType.GLOBAL.value)

    def global_product_exists(self, sku: str) -> bool:
        """Vérifier qu'un produit Global existe pour ce SKU"""
        return self.db.scalar(
            select(Product.id).where(*self._global_sku(sku)).limit(1)
        ) is not None

    def get_reducible_product(self, sku: str) -> Optional[Product]:
        """
        Récupérer l'unique produit Global non-bundle pour ce SKU.
        Zéro ou plusieurs correspondances renvoient None.
        """
        products = self.db.scalars(
            select(Product)
            .where(*self._global_sku(sku), Product.is_bundle == False)  # noqa: E712
            .limit(2)
        ).all()
        if len(products) != 1:
            return None
        return products[0]

    def set_stock(self, sku: str, stock: int) -> int:
        """Écraser le stock (valeur absolue) et recalculer isInStock"""
        result = self.db.execute(
            update(Product)
            .where(*self._global_sku(sku))
            .values(
                stock_quantity=str(stock),
                is_in_stock=stock > 0,
                updated_at=func.now()
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def _shift_stock(self, sku: str, delta: int, *conditions) -> int:
        # Une seule instruction : deux appels concurrents se sérialisent sur la ligne
        new_qty = cast(Product.stock_quantity, Integer) + delta
        result = self.db.execute(
            update(Product)
            .where(*self._global_sku(sku), *conditions)
            .values(
                stock_quantity=cast(new_qty, String),
                is_in_stock=new_qty > 0,
                updated_at=func.now()
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def reduce_product_stock(self, sku: str, qty: int) -> int:
        """Décrémenter le stock de qty unités (aucun plancher appliqué, bundles exclus)"""
        return self._shift_stock(sku, -qty, Product.is_bundle == False)  # noqa: E712

    def restore_product_stock(self, sku: str, qty: int) -> int:
        """Réincrémenter le stock de qty unités"""
        return self._shift_stock(sku, qty)
