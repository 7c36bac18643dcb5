from __future__ import annotations
"""server/prometheus_lens/infrastructure/persistence/repositories/folder_repository.py
~~~~~~~~~~~~~~~~~~~~~~~~
Repo dossiers d'assets (SQLAlchemy). Même contrat que le repo assets : flush, jamais commit.
"""
from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from prometheus_lens.domain.entities import AssetFolder
from prometheus_lens.infrastructure.persistence.database.models.asset_folder import AssetFolderRecord


def _to_entity(row: AssetFolderRecord) -> AssetFolder:
    return AssetFolder(id=row.id, name=row.name, parent_id=row.parent_id)


class SqlAlchemyFolderRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self) -> list[AssetFolder]:
        stmt = select(AssetFolderRecord).order_by(AssetFolderRecord.name, AssetFolderRecord.id)
        return [_to_entity(r) for r in self.db.scalars(stmt).all()]

    def get(self, folder_id: str) -> Optional[AssetFolder]:
        row = self.db.get(AssetFolderRecord, folder_id)
        return _to_entity(row) if row else None

    def count(self) -> int:
        return int(self.db.scalar(select(func.count()).select_from(AssetFolderRecord)) or 0)

    def add(self, folder: AssetFolder) -> AssetFolder:
        row = AssetFolderRecord(id=folder.id, name=folder.name, parent_id=folder.parent_id)
        self.db.add(row)
        self.db.flush()
        return _to_entity(row)

    def save(self, folder: AssetFolder) -> AssetFolder:
        row = self.db.get(AssetFolderRecord, folder.id)
        if row is None:
            raise LookupError(f"folder {folder.id} does not exist")
        row.name = folder.name
        row.parent_id = folder.parent_id
        self.db.flush()
        return _to_entity(row)

    def delete(self, folder_id: str) -> bool:
        row = self.db.get(AssetFolderRecord, folder_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        return True

    def clear_parent(self, parent_id: str) -> int:
        res = self.db.execute(
            update(AssetFolderRecord)
            .where(AssetFolderRecord.parent_id == parent_id)
            .values(parent_id=None)
            .execution_options(synchronize_session="evaluate")
        )
        return res.rowcount or 0
