from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, update, desc

from app.models.site import WooCommerceSite


class SiteRepository:
    """Repository pour les boutiques WooCommerce connectées"""

    def __init__(self, db: Session):
        self.db = db

    def get_sites(self) -> List[WooCommerceSite]:
        """Récupérer tous les sites, du plus récent au plus ancien"""
        return list(self.db.scalars(
            select(WooCommerceSite)
            .order_by(desc(WooCommerceSite.created_at), desc(WooCommerceSite.id))
        ))

    def get_site_by_url(self, site_url: str) -> Optional[WooCommerceSite]:
        return self.db.scalar(
            select(WooCommerceSite).where(WooCommerceSite.site_url == site_url)
        )

    def get_active_site_by_api_key(self, api_key: str) -> Optional[WooCommerceSite]:
        """Récupérer un site actif par sa clé API"""
        return self.db.scalar(
            select(WooCommerceSite).where(
                WooCommerceSite.api_key == api_key,
                WooCommerceSite.is_active == True  # noqa: E712
            )
        )

    def clear_primary(self, except_url: str) -> None:
        """Retirer le statut principal de tous les autres sites"""
        self.db.execute(
            update(WooCommerceSite)
            .where(WooCommerceSite.site_url != except_url)
            .values(is_primary=False)
            .execution_options(synchronize_session=False)
        )

    def create_site(self, site_data: dict) -> WooCommerceSite:
        """Créer un site"""
        site = WooCommerceSite(**site_data)
        self.db.add(site)
        self.db.commit()
        self.db.refresh(site)
        return site
