# ===================================
# app/models/site.py
# ===================================
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.sql import func
from enum import Enum

from app.core.database import Base


class SyncStatus(str, Enum):
    """État de la dernière synchronisation d'un site"""
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


class WooCommerceSite(Base):
    """Boutique WooCommerce connectée à l'inventaire global"""
    __tablename__ = "woocommerce_sites"

    id = Column(Integer, primary_key=True, index=True)
    site_url = Column(String, unique=True, nullable=False, index=True)
    site_name = Column(String, nullable=True)

    # Identifiants REST WooCommerce
    consumer_key = Column(String, nullable=True)
    consumer_secret = Column(String, nullable=True)

    # Clé API émise pour le plugin du site
    api_key = Column(String, unique=True, nullable=False, index=True)

    # État
    is_primary = Column(Boolean, default=False, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    sync_status = Column(String, default=SyncStatus.PENDING.value, nullable=False)
    last_sync = Column(DateTime(timezone=True), nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<WooCommerceSite(id={self.id}, url='{self.site_url}', primary={self.is_primary})>"
