from __future__ import annotations
"""
server/prometheus_lens/api/v1/endpoints/prometheus.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Configuration Prometheus agrégée.

- GET  /prometheus/config?format=json|yaml : aperçu, sans écriture ni reload
- POST /prometheus/reload                  : écrit prometheus.yml puis POST /-/reload
"""
from typing import Literal

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from prometheus_lens.api.deps import get_uow
from prometheus_lens.application.services import prometheus_config_service as svc
from prometheus_lens.domain.repositories import UnitOfWork

router = APIRouter(prefix="/prometheus", tags=["prometheus"])


@router.get("/config")
def get_config(
    format: Literal["json", "yaml"] = Query("json"),
    uow: UnitOfWork = Depends(get_uow),
):
    document = svc.build_prometheus_config(uow.assets.list())
    if format == "yaml":
        return PlainTextResponse(svc.render_prometheus_yaml(document), media_type="application/x-yaml")
    return document


@router.post("/reload")
def reload(uow: UnitOfWork = Depends(get_uow)) -> dict:
    result = svc.write_and_reload(uow)
    return {"success": True, "path": result.path, "jobs": result.jobs}
