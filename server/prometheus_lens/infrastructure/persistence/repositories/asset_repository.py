from __future__ import annotations
"""server/prometheus_lens/infrastructure/persistence/repositories/asset_repository.py
~~~~~~~~~~~~~~~~~~~~~~~~
Repo assets (SQLAlchemy).

- Le repo **reçoit** une Session fournie par l'appelant (UnitOfWork).
- Il ne crée ni ne ferme la session et **ne commit pas** : flush uniquement.
"""
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from prometheus_lens.core.utils.datetime import as_utc
from prometheus_lens.domain.entities import Asset
from prometheus_lens.infrastructure.persistence.database.models.asset import AssetRecord


def _to_entity(row: AssetRecord) -> Asset:
    return Asset(
        id=row.id,
        name=row.name,
        type=row.type,
        status=row.status,
        last_checked=as_utc(row.last_checked),
        grafana_link=row.grafana_link,
        configuration=dict(row.configuration or {}),
        tags=list(row.tags or []),
        folder_id=row.folder_id,
    )


def _apply(row: AssetRecord, asset: Asset) -> None:
    row.name = asset.name
    row.type = asset.type
    row.status = asset.status
    row.last_checked = asset.last_checked
    row.grafana_link = asset.grafana_link
    row.configuration = dict(asset.configuration or {})
    row.tags = list(asset.tags or [])
    row.folder_id = asset.folder_id


class SqlAlchemyAssetRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self) -> list[Asset]:
        stmt = select(AssetRecord).order_by(AssetRecord.name, AssetRecord.id)
        return [_to_entity(r) for r in self.db.scalars(stmt).all()]

    def get(self, asset_id: str) -> Optional[Asset]:
        row = self.db.get(AssetRecord, asset_id)
        return _to_entity(row) if row else None

    def add(self, asset: Asset) -> Asset:
        row = AssetRecord(id=asset.id)
        _apply(row, asset)
        self.db.add(row)
        self.db.flush()
        return _to_entity(row)

    def save(self, asset: Asset) -> Asset:
        row = self.db.get(AssetRecord, asset.id)
        if row is None:
            raise LookupError(f"asset {asset.id} does not exist")
        _apply(row, asset)
        self.db.flush()
        return _to_entity(row)

    def delete(self, asset_id: str) -> bool:
        row = self.db.get(AssetRecord, asset_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        return True

    def clear_folder(self, folder_id: str) -> int:
        res = self.db.execute(
            update(AssetRecord)
            .where(AssetRecord.folder_id == folder_id)
            .values(folder_id=None)
            .execution_options(synchronize_session="evaluate")
        )
        return res.rowcount or 0
