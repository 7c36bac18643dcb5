from __future__ import annotations
"""server/prometheus_lens/infrastructure/persistence/repositories/unit_of_work.py
~~~~~~~~~~~~~~~~~~~~~~~~
UnitOfWork SQLAlchemy : regroupe les repos sur UNE session et porte la
frontière transactionnelle (commit/rollback). La session reste gérée par
l'appelant (Depends(get_db) ou get_sync_session()).
"""
from sqlalchemy.orm import Session

from prometheus_lens.infrastructure.persistence.repositories.asset_repository import SqlAlchemyAssetRepository
from prometheus_lens.infrastructure.persistence.repositories.folder_repository import SqlAlchemyFolderRepository


class SqlAlchemyUnitOfWork:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.assets = SqlAlchemyAssetRepository(db)
        self.folders = SqlAlchemyFolderRepository(db)

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
