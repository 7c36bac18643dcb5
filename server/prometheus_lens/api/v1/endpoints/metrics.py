from __future__ import annotations
"""server/prometheus_lens/api/v1/endpoints/metrics.py
~~~~~~~~~~~~~~~~~~~~~~~~
Exposition Prometheus des métriques du service (registre par défaut).
"""
from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


@router.get("/metrics")
def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
