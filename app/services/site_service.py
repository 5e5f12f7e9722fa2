# ===================================
# app/services/site_service.py
# ===================================

import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import generate_api_key
from app.models.site import WooCommerceSite, SyncStatus
from app.repositories.site_repo import SiteRepository
from app.schemas.site import SiteCreate

logger = logging.getLogger(__name__)


class SiteValidationError(ValueError):
    """Données de site refusées (réponse 400)"""


class SiteService:
    """Service pour l'enregistrement des boutiques WooCommerce"""

    def __init__(self, db: Session):
        self.db = db
        self.site_repo = SiteRepository(db)

    def register_site(self, site_data: SiteCreate) -> tuple[WooCommerceSite, str]:
        """
        Enregistrer un site et lui émettre une clé API.
        Retourne le site créé et la clé en clair.
        """
        if not site_data.site_url.startswith(("http://", "https://")):
            raise SiteValidationError("Site URL must start with http:// or https://")

        if self.site_repo.get_site_by_url(site_data.site_url):
            raise SiteValidationError("Site URL already exists")

        api_key = generate_api_key()

        # Un seul site principal
        if site_data.is_primary:
            self.site_repo.clear_primary(except_url=site_data.site_url)

        site_dict = site_data.model_dump()
        site_dict.update(
            api_key=api_key,
            is_active=True,
            sync_status=SyncStatus.PENDING.value
        )

        try:
            site = self.site_repo.create_site(site_dict)
        except IntegrityError:
            # Insertion concurrente du même site_url
            self.db.rollback()
            raise SiteValidationError("Site URL already exists")

        logger.info(f"✓ Site enregistré: {site.site_url} (principal={site.is_primary})")
        return site, api_key
