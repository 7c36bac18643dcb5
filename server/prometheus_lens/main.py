from __future__ import annotations
"""server/prometheus_lens/main.py
~~~~~~~~~~~~~~~~~~~~~~~~
Point d'entrée FastAPI.
"""
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prometheus_lens.api.v1.router import api_router
from prometheus_lens.core.config import settings
from prometheus_lens.core.logging import setup_logging
from prometheus_lens.core.middleware import install_global_middleware
from prometheus_lens.infrastructure.persistence.database.session import init_db

app = FastAPI(title="Prometheus Lens", version="0.1.0")

allow_origins: List[str] = []
if origins := getattr(settings, "CORS_ALLOW_ORIGINS", None):
    allow_origins = [o.strip() for o in origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Handlers d'erreurs : à poser avant le premier appel, pas dans le startup.
install_global_middleware(app)


@app.on_event("startup")
async def startup() -> None:
    setup_logging()
    init_db()


app.include_router(api_router, prefix="/api/v1")
