from __future__ import annotations
"""server/prometheus_lens/api/v1/endpoints/config.py
~~~~~~~~~~~~~~~~~~~~~~~~
Backend de l'assistant : aperçu du job Prometheus et consignes d'installation.
Aucun accès base de données.
"""
from fastapi import APIRouter

from prometheus_lens.api.schemas.config import ConfigPreviewIn
from prometheus_lens.domain.config_generator import PARAM_HINTS, generate_scrape_config
from prometheus_lens.domain.entities import AssetType
from prometheus_lens.domain.setup_instructions import setup_instructions

router = APIRouter(prefix="/config", tags=["config"])


@router.post("/preview")
def preview(payload: ConfigPreviewIn) -> dict:
    generated = generate_scrape_config(payload.asset_type, payload.name, payload.param1, payload.param2)
    return {
        "complete": generated.complete,
        "preview": generated.to_preview(),
        "configuration": generated.to_storage() if generated.complete else None,
        "notes": list(generated.notes),
        "instructions": setup_instructions(payload.asset_type),
    }


@router.get("/asset-types")
def asset_types() -> list[dict]:
    """Types connus + libellés des deux paramètres du formulaire."""
    return [
        {"type": t, "param1Hint": PARAM_HINTS[t][0], "param2Hint": PARAM_HINTS[t][1]}
        for t in AssetType.values()
    ]
