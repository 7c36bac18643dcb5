from __future__ import annotations

"""server/prometheus_lens/application/services/asset_service.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Inventaire des assets : création, mise à jour partielle, remplacement de la
configuration Prometheus, transitions de statut, suppression.

Notes :
- Le service ne parle qu'au UnitOfWork (SQLAlchemy en prod, mémoire en test).
- Mise à jour partielle : ``UNSET`` = champ non fourni. Pour ``folder_id``,
  ``None`` ou ``""`` détachent l'asset de son dossier.
"""

import logging
from typing import Any, Iterable, Optional

from prometheus_lens.core.utils.datetime import utcnow
from prometheus_lens.core.utils.ids import ASSET_PREFIX, new_id
from prometheus_lens.domain.config_generator import generate_scrape_config
from prometheus_lens.domain.entities import Asset, AssetStatus, AssetType, normalize_tags
from prometheus_lens.domain.errors import NotFoundError, ValidationError
from prometheus_lens.domain.repositories import UnitOfWork

logger = logging.getLogger(__name__)

__all__ = ["AssetService", "UNSET"]


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def _validate_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Asset name is required and must be a non-empty string", field="name")
    return name.strip()


def _validate_type(asset_type: Any) -> str:
    if not isinstance(asset_type, str) or not asset_type.strip():
        raise ValidationError("Asset type is required", field="type")
    if asset_type not in AssetType.values():
        raise ValidationError(
            f"Invalid asset type '{asset_type}'. Expected one of: {', '.join(AssetType.values())}",
            field="type",
        )
    return asset_type


def _validate_configuration(configuration: Any) -> dict[str, Any]:
    if not isinstance(configuration, dict):
        raise ValidationError("Invalid configuration payload. Expected a JSON object.", field="configuration")
    return dict(configuration)


def _clean_link(link: Optional[str]) -> Optional[str]:
    if link is None:
        return None
    link = str(link).strip()
    return link or None


class AssetService:
    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    # ── Lecture ──────────────────────────────────────────────────────────────

    def list_assets(self) -> list[Asset]:
        return self.uow.assets.list()

    def get_asset(self, asset_id: str) -> Asset:
        asset = self.uow.assets.get(asset_id)
        if asset is None:
            raise NotFoundError("Asset", asset_id)
        return asset

    # ── Écriture ─────────────────────────────────────────────────────────────

    def create_asset(
        self,
        name: Any,
        asset_type: Any,
        *,
        grafana_link: Optional[str] = None,
        tags: Iterable[str] | str | None = None,
        folder_id: Optional[str] = None,
        configuration: Optional[dict[str, Any]] = None,
        config_param1: Optional[str] = None,
        config_param2: Optional[str] = None,
    ) -> Asset:
        """
        Crée un asset en statut ``pending``.

        Sans ``configuration`` explicite, le job est généré à partir de
        ``config_param1`` / ``config_param2`` ; sans aucun paramètre la
        configuration reste vide (l'asset n'apparaît pas dans prometheus.yml).
        """
        name = _validate_name(name)
        asset_type = _validate_type(asset_type)

        if configuration is not None:
            configuration = _validate_configuration(configuration)
        elif config_param1 or config_param2:
            configuration = generate_scrape_config(asset_type, name, config_param1, config_param2).to_storage()
        else:
            configuration = {}

        folder_id = self._resolve_folder(folder_id)

        asset = self.uow.assets.add(
            Asset(
                id=new_id(ASSET_PREFIX),
                name=name,
                type=asset_type,
                status=AssetStatus.PENDING.value,
                last_checked=utcnow(),
                grafana_link=_clean_link(grafana_link),
                configuration=configuration,
                tags=normalize_tags(tags),
                folder_id=folder_id,
            )
        )
        self.uow.commit()
        logger.info("Asset créé: %s (%s, type=%s)", asset.name, asset.id, asset.type)
        return asset

    def update_asset(
        self,
        asset_id: str,
        *,
        tags: Any = UNSET,
        grafana_link: Any = UNSET,
        folder_id: Any = UNSET,
        configuration: Any = UNSET,
    ) -> Asset:
        asset = self.get_asset(asset_id)

        if tags is not UNSET:
            asset.tags = normalize_tags(tags)
        if grafana_link is not UNSET:
            asset.grafana_link = _clean_link(grafana_link)
        if folder_id is not UNSET:
            asset.folder_id = self._resolve_folder(folder_id)
        if configuration is not UNSET:
            asset.configuration = {} if configuration is None else _validate_configuration(configuration)
            asset.last_checked = utcnow()

        asset = self.uow.assets.save(asset)
        self.uow.commit()
        logger.info("Asset mis à jour: %s (%s)", asset.name, asset.id)
        return asset

    def replace_configuration(self, asset_id: str, configuration: Any) -> Asset:
        """Remplace la configuration en bloc ; id, nom, type et tags ne bougent pas."""
        configuration = _validate_configuration(configuration)
        asset = self.get_asset(asset_id)
        asset.configuration = configuration
        asset.last_checked = utcnow()
        asset = self.uow.assets.save(asset)
        self.uow.commit()
        logger.info("Configuration remplacée pour l'asset %s", asset.id)
        return asset

    def set_status(self, asset_id: str, status: AssetStatus | str) -> Asset:
        try:
            status = AssetStatus(status)
        except ValueError:
            raise ValidationError(f"Invalid asset status '{status}'", field="status") from None
        asset = self.get_asset(asset_id)
        asset.mark(status, utcnow())
        asset = self.uow.assets.save(asset)
        self.uow.commit()
        return asset

    def delete_asset(self, asset_id: str) -> None:
        if not self.uow.assets.delete(asset_id):
            raise NotFoundError("Asset", asset_id)
        self.uow.commit()
        logger.info("Asset supprimé: %s", asset_id)

    # ── Interne ──────────────────────────────────────────────────────────────

    def _resolve_folder(self, folder_id: Any) -> Optional[str]:
        """None / "" -> pas de dossier ; sinon le dossier doit exister."""
        if folder_id is None:
            return None
        if not isinstance(folder_id, str):
            raise ValidationError("Folder ID must be a string", field="folderId")
        folder_id = folder_id.strip()
        if not folder_id:
            return None
        if self.uow.folders.get(folder_id) is None:
            raise ValidationError(f"Folder {folder_id} does not exist", field="folderId")
        return folder_id
