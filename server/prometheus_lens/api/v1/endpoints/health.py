from __future__ import annotations
"""server/prometheus_lens/api/v1/endpoints/health.py
~~~~~~~~~~~~~~~~~~~~~~~~
Health check (liveness du service lui-même).
"""
from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
