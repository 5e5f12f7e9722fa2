# ===================================
# app/api/v1/stock.py
# ===================================
from typing import Any, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import require_stock_source
from app.api.deps import read_stock_delta, get_source_site
from app.services.stock_service import StockService
from app.schemas.stock import (
    ManualStockUpdate,
    StockDelta,
    SyncedResponse,
    ReducedResponse,
    IgnoredResponse,
    RestoredResponse
)

router = APIRouter()


@router.post("/manual", response_model=SyncedResponse)
def manual_stock_update(
    payload: ManualStockUpdate,
    site_url: Optional[str] = Depends(get_source_site),
    db: Session = Depends(get_db)
) -> Any:
    """
    Écraser le stock d'un produit Global.
    Pas d'authentification. Réponse identique, que le SKU existe ou non.
    """
    StockService(db).manual_update(payload.sku, payload.stock, site_url=site_url)
    return SyncedResponse()


@router.post(
    "/reduce",
    response_model=None,
    responses={200: {"model": ReducedResponse}},
    dependencies=[Depends(require_stock_source)]
)
def reduce_stock(
    payload: StockDelta = Depends(read_stock_delta),
    site_url: Optional[str] = Depends(get_source_site),
    db: Session = Depends(get_db)
) -> Any:
    """
    Réduire le stock après une commande WooCommerce.
    Les bundles et produits non Global sont ignorés.
    """
    reduced = StockService(db).reduce(
        payload.sku, payload.qty, order_id=payload.order_id, site_url=site_url
    )
    if not reduced:
        return IgnoredResponse()
    return ReducedResponse()


@router.post("/restore", response_model=RestoredResponse)
def restore_stock(
    payload: StockDelta,
    site_url: Optional[str] = Depends(get_source_site),
    db: Session = Depends(get_db)
) -> Any:
    """
    Restaurer le stock (commande annulée ou remboursée).
    Pas d'authentification ni de contrôle bundle/type, contrairement à /reduce.
    """
    StockService(db).restore(
        payload.sku, payload.qty, order_id=payload.order_id, site_url=site_url
    )
    return RestoredResponse()
