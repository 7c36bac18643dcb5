from __future__ import annotations
"""
server/prometheus_lens/api/v1/endpoints/assets.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Endpoints de l'inventaire d'assets.

- GET    /assets                      : liste (nom, puis id)
- POST   /assets                      : création (statut pending)
- GET    /assets/{id}                 : détail
- PUT    /assets/{id}                 : mise à jour partielle (tags, grafanaLink, folderId, configuration)
- DELETE /assets/{id}                 : suppression
- PUT    /assets/{id}/configuration   : remplacement de la configuration (objet JSON)
- GET    /assets/{id}/health          : sonde HTTP de la cible principale

Les erreurs métier (ValidationError, NotFoundError) sont traduites par
core/middleware.py ; les endpoints restent sans try/except.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from prometheus_lens.api.deps import get_asset_service, get_uow
from prometheus_lens.api.schemas.asset import AssetCreateIn, AssetUpdateIn
from prometheus_lens.api.v1.serializers.asset import serialize_asset
from prometheus_lens.application.services import health_probe_service
from prometheus_lens.application.services.asset_service import AssetService
from prometheus_lens.domain.entities import AssetStatus
from prometheus_lens.domain.repositories import UnitOfWork

router = APIRouter(prefix="/assets", tags=["assets"])


@router.get("")
def list_assets(svc: AssetService = Depends(get_asset_service)) -> list[dict]:
    return [serialize_asset(a) for a in svc.list_assets()]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_asset(payload: AssetCreateIn, svc: AssetService = Depends(get_asset_service)) -> dict:
    asset = svc.create_asset(
        payload.name,
        payload.type,
        grafana_link=payload.grafana_link,
        tags=payload.tags,
        folder_id=payload.folder_id,
        configuration=payload.configuration,
        config_param1=payload.config_param1,
        config_param2=payload.config_param2,
    )
    return serialize_asset(asset)


@router.get("/{asset_id}")
def get_asset(asset_id: str, svc: AssetService = Depends(get_asset_service)) -> dict:
    return serialize_asset(svc.get_asset(asset_id))


@router.put("/{asset_id}")
def update_asset(
    asset_id: str,
    payload: AssetUpdateIn,
    svc: AssetService = Depends(get_asset_service),
) -> dict:
    return serialize_asset(svc.update_asset(asset_id, **payload.provided()))


@router.delete("/{asset_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_asset(asset_id: str, svc: AssetService = Depends(get_asset_service)) -> None:
    svc.delete_asset(asset_id)


@router.put("/{asset_id}/configuration")
def replace_configuration(
    asset_id: str,
    configuration: Any = Body(...),
    svc: AssetService = Depends(get_asset_service),
) -> dict:
    """Le corps entier est la nouvelle configuration (objet JSON attendu)."""
    return serialize_asset(svc.replace_configuration(asset_id, configuration))


@router.get("/{asset_id}/health")
def probe_asset_health(asset_id: str, uow: UnitOfWork = Depends(get_uow)) -> JSONResponse:
    """
    200 : connected / disconnected
    400 : aucune cible exploitable dans la configuration
    502 : cible injoignable (timeout, erreur réseau)
    """
    result = health_probe_service.probe_asset(uow, asset_id)
    if result.url is None:
        code = status.HTTP_400_BAD_REQUEST
    elif result.status == AssetStatus.ERROR.value:
        code = status.HTTP_502_BAD_GATEWAY
    else:
        code = status.HTTP_200_OK
    body = {"status": result.status, "message": result.message, "url": result.url}
    return JSONResponse(status_code=code, content=body)
