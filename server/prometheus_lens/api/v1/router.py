from __future__ import annotations
"""server/prometheus_lens/api/v1/router.py
~~~~~~~~~~~~~~~~~~~~~~~~
Router principal API v1.
"""
from fastapi import APIRouter

from prometheus_lens.api.v1.endpoints import assets, config, folders, health, metrics, prometheus

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(assets.router, tags=["assets"])
api_router.include_router(folders.router, tags=["folders"])
api_router.include_router(config.router, tags=["config"])
api_router.include_router(prometheus.router, tags=["prometheus"])
api_router.include_router(metrics.router, tags=["metrics"])
