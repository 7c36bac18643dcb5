from __future__ import annotations
"""
server/prometheus_lens/api/deps.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Dépendances communes côté API.

- get_uow : UnitOfWork SQLAlchemy sur la session de la requête (get_db)
- get_asset_service / get_folder_service : services métier prêts à l'emploi

Les tests peuvent surcharger ``get_uow`` (app.dependency_overrides) pour
brancher un InMemoryUnitOfWork.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from prometheus_lens.application.services.asset_service import AssetService
from prometheus_lens.application.services.folder_service import FolderService
from prometheus_lens.domain.repositories import UnitOfWork
from prometheus_lens.infrastructure.persistence.database.session import get_db
from prometheus_lens.infrastructure.persistence.repositories.unit_of_work import SqlAlchemyUnitOfWork


def get_uow(db: Session = Depends(get_db)) -> UnitOfWork:
    return SqlAlchemyUnitOfWork(db)


def get_asset_service(uow: UnitOfWork = Depends(get_uow)) -> AssetService:
    return AssetService(uow)


def get_folder_service(uow: UnitOfWork = Depends(get_uow)) -> FolderService:
    return FolderService(uow)
