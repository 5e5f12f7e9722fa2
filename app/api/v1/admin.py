# ===================================
# app/api/v1/admin.py
# ===================================
import logging
from typing import Any
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import require_admin_key
from app.repositories.site_repo import SiteRepository
from app.repositories.sync_log_repo import SyncLogRepository
from app.services.site_service import SiteService, SiteValidationError
from app.schemas.site import Site, SiteCreate, SitesListResponse, SiteCreateResponse
from app.schemas.stock import StockSyncLogRead, SyncLogsListResponse

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin_key)])


@router.get("/sites/lists", response_model=SitesListResponse)
def list_sites(db: Session = Depends(get_db)) -> Any:
    """
    Lister toutes les boutiques enregistrées, les plus récentes d'abord
    """
    try:
        sites = SiteRepository(db).get_sites()
    except SQLAlchemyError as e:
        logger.error(f"Erreur lors de la lecture des sites: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    return SitesListResponse(data=[Site.model_validate(site) for site in sites])


@router.post("/sites/add", response_model=SiteCreateResponse)
def add_site(site_data: SiteCreate, db: Session = Depends(get_db)) -> Any:
    """
    Enregistrer une boutique et lui émettre une clé API
    """
    try:
        site, api_key = SiteService(db).register_site(site_data)
    except SiteValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return SiteCreateResponse(data=Site.model_validate(site), api_key=api_key)


@router.get("/sync-logs", response_model=SyncLogsListResponse)
def list_sync_logs(
    sku: str = Query(..., min_length=1, description="SKU du produit"),
    limit: int = Query(50, ge=1, le=500, description="Nombre d'entrées à retourner"),
    db: Session = Depends(get_db)
) -> Any:
    """
    Historique des actions de stock pour un SKU
    """
    logs = SyncLogRepository(db).get_logs_for_sku(sku, limit=limit)
    return SyncLogsListResponse(data=[StockSyncLogRead.model_validate(log) for log in logs])
