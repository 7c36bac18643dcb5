from __future__ import annotations
"""
server/prometheus_lens/api/schemas/config.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Entrée de l'aperçu de l'assistant de configuration.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ConfigPreviewIn(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {"type": "Kubernetes", "name": "Prod Cluster", "param1": "https://kube-api.example.com"}
        },
    )

    asset_type: Optional[str] = Field(default=None, alias="type")
    name: Optional[str] = None
    param1: Optional[str] = Field(default=None, alias="configParam1")
    param2: Optional[str] = Field(default=None, alias="configParam2")
