# ===================================
# app/api/v1/products.py
# ===================================
from typing import Any
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import require_site_api_key
from app.repositories.product_repo import ProductRepository
from app.schemas.stock import ProductCheckRequest

router = APIRouter()


@router.post("/check", dependencies=[Depends(require_site_api_key)])
def check_product(payload: ProductCheckRequest, db: Session = Depends(get_db)) -> Any:
    """
    Indiquer au plugin si un SKU est géré en stock Global
    """
    if not payload.sku:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="SKU is required"
        )

    if not ProductRepository(db).global_product_exists(payload.sku):
        return {"exists": False}

    return {"exists": True, "sku": payload.sku}
