# ===================================
# app/schemas/site.py
# ===================================

from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field


class SiteCreate(BaseModel):
    site_url: str = Field(min_length=1)
    site_name: Optional[str] = None
    consumer_key: Optional[str] = None
    consumer_secret: Optional[str] = None
    is_primary: bool = False


class Site(BaseModel):
    id: int
    site_url: str
    site_name: Optional[str] = None
    consumer_key: Optional[str] = None
    consumer_secret: Optional[str] = None
    api_key: str
    is_primary: bool
    is_active: bool
    sync_status: str
    last_sync: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SitesListResponse(BaseModel):
    success: bool = True
    data: List[Site]


class SiteCreateResponse(BaseModel):
    success: bool = True
    data: Site
    api_key: str = Field(alias="apiKey")  # Clé en clair, affichée une seule fois

    class Config:
        populate_by_name = True
