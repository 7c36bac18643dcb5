from __future__ import annotations
"""
server/prometheus_lens/api/schemas/asset.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Pydantic schemas pour les assets.

- Les clés camelCase (grafanaLink, folderId...) et snake_case sont acceptées.
- Les règles métier (nom non vide, type connu, dossier existant) sont
  vérifiées par AssetService : le schéma ne contrôle que les types.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class AssetCreateIn(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Web Server 01",
                "type": "Server",
                "tags": ["prod", "web"],
                "configParam1": "192.168.1.10",
                "configParam2": "9100",
            }
        },
    )

    name: Optional[str] = None
    type: Optional[str] = None
    grafana_link: Optional[str] = Field(default=None, alias="grafanaLink")
    # Liste ou chaîne "a, b, c" (formulaire)
    tags: Union[list[str], str, None] = None
    folder_id: Optional[str] = Field(default=None, alias="folderId")
    configuration: Optional[dict[str, Any]] = None
    config_param1: Optional[str] = Field(default=None, alias="configParam1")
    config_param2: Optional[str] = Field(default=None, alias="configParam2")


class AssetUpdateIn(BaseModel):
    """
    Mise à jour partielle : seules les clés présentes dans le JSON sont appliquées
    (``model_fields_set``). ``folderId: null`` ou ``""`` détache l'asset.
    Toute autre clé (name, type...) est refusée (400).
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    tags: Union[list[str], str, None] = None
    grafana_link: Optional[str] = Field(default=None, alias="grafanaLink")
    folder_id: Optional[str] = Field(default=None, alias="folderId")
    configuration: Optional[dict[str, Any]] = None

    def provided(self) -> dict[str, Any]:
        """Champs explicitement fournis -> kwargs pour AssetService.update_asset."""
        return {name: getattr(self, name) for name in self.model_fields_set}
