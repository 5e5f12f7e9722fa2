# ===================================
# app/core/security.py
# ===================================

import hmac
import logging
import secrets
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.models.site import WooCommerceSite
from app.repositories.site_repo import SiteRepository

logger = logging.getLogger(__name__)


class StockSourceUnauthorized(Exception):
    """Header x-wgss-source absent ou invalide (réponse en texte brut)"""


def secrets_match(provided: Optional[str], expected: Optional[str]) -> bool:
    """Comparer deux secrets en temps constant"""
    if provided is None or expected is None:
        return False
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def generate_api_key() -> str:
    """Générer une clé API de site (64 caractères hexadécimaux)"""
    return secrets.token_hex(32)


def require_admin_key(
    x_admin_key: Optional[str] = Header(None, alias="x-admin-key")
) -> None:
    """
    Vérifier la clé administrateur.
    Aucun accès à la base n'a lieu avant cette vérification.
    """
    if not secrets_match(x_admin_key, settings.admin_api_key):
        logger.warning("Accès admin refusé: clé invalide ou absente")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized"
        )


def require_stock_source(
    x_wgss_source: Optional[str] = Header(None, alias="x-wgss-source")
) -> None:
    """Vérifier le secret partagé envoyé par le plugin WooCommerce"""
    if not secrets_match(x_wgss_source, settings.stock_source_secret):
        logger.warning("Réduction de stock refusée: source invalide")
        raise StockSourceUnauthorized()


def require_site_api_key(
    x_wgss_api_key: Optional[str] = Header(None, alias="x-wgss-api-key"),
    x_wgss_source: Optional[str] = Header(None, alias="x-wgss-source"),
    x_wgss_site: Optional[str] = Header(None, alias="x-wgss-site"),
    db: Session = Depends(get_db)
) -> WooCommerceSite:
    """
    Authentifier un site WooCommerce par sa clé API.
    Les trois headers x-wgss-* sont obligatoires et la clé doit appartenir
    à un site actif.
    """
    if not x_wgss_api_key or not x_wgss_source or not x_wgss_site:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized"
        )

    site = SiteRepository(db).get_active_site_by_api_key(x_wgss_api_key)
    if not site:
        logger.warning(f"Clé API inconnue pour le site {x_wgss_site}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key"
        )

    return site
