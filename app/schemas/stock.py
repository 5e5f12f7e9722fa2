# ===================================
# app/schemas/stock.py
# ===================================

from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field


class ManualStockUpdate(BaseModel):
    sku: str = Field(min_length=1)
    stock: int  # Valeur absolue, peut être négative ou nulle


class StockDelta(BaseModel):
    sku: str = Field(min_length=1)
    qty: int = Field(gt=0)
    order_id: Optional[str] = None  # Référence de commande WooCommerce (historique)


class SyncedResponse(BaseModel):
    synced: bool = True


class ReducedResponse(BaseModel):
    reduced: bool = True


class IgnoredResponse(BaseModel):
    ignored: bool = True


class RestoredResponse(BaseModel):
    restored: bool = True


class ProductCheckRequest(BaseModel):
    sku: Optional[str] = None


class StockSyncLogRead(BaseModel):
    id: int
    product_sku: Optional[str] = None
    site_url: Optional[str] = None
    action: str
    source: str
    quantity: Optional[int] = None
    new_stock: Optional[int] = None
    order_id: Optional[str] = None
    success: bool
    error_message: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SyncLogsListResponse(BaseModel):
    success: bool = True
    data: List[StockSyncLogRead]
