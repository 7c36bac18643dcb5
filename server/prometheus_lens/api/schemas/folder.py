from __future__ import annotations
"""
server/prometheus_lens/api/schemas/folder.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Pydantic schema pour les dossiers (création et mise à jour).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FolderIn(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"name": "Production", "parentId": None}},
    )

    name: Optional[str] = None
    parent_id: Optional[str] = Field(default=None, alias="parentId")
