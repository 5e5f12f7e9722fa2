from typing import Optional
from fastapi import Header, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app.schemas.stock import StockDelta


async def read_stock_delta(request: Request) -> StockDelta:
    """
    Lire le corps {sku, qty} à la main.
    Déclaré après les dépendances d'authentification, le corps n'est jamais
    lu pour une requête refusée.
    """
    try:
        payload = await request.json()
    except ValueError:
        raise RequestValidationError([
            {"loc": ("body",), "msg": "JSON decode error", "type": "json_invalid"}
        ])

    try:
        return StockDelta.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors())


def get_source_site(
    x_wgss_site: Optional[str] = Header(None, alias="x-wgss-site")
) -> Optional[str]:
    """URL du site émetteur, si le plugin l'envoie (historique uniquement)"""
    return x_wgss_site
