from __future__ import annotations
"""
server/prometheus_lens/domain/repositories.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Contrats de persistance utilisés par les services.

Deux implémentations :
- SQLAlchemy (infrastructure/persistence/repositories/*_repository.py)
- mémoire    (infrastructure/persistence/repositories/in_memory.py), pour les tests

Les repositories ne commitent jamais : c'est le rôle du UnitOfWork
(commit/rollback), piloté par les services.
"""

from typing import Optional, Protocol

from prometheus_lens.domain.entities import Asset, AssetFolder


class AssetRepository(Protocol):
    def list(self) -> list[Asset]:
        """Tous les assets, triés par nom puis id (ordre stable)."""
        ...

    def get(self, asset_id: str) -> Optional[Asset]: ...

    def add(self, asset: Asset) -> Asset: ...

    def save(self, asset: Asset) -> Asset:
        """Écrit tous les champs modifiables d'un asset existant."""
        ...

    def delete(self, asset_id: str) -> bool: ...

    def clear_folder(self, folder_id: str) -> int:
        """Détache les assets du dossier ; retourne le nombre de lignes touchées."""
        ...


class FolderRepository(Protocol):
    def list(self) -> list[AssetFolder]: ...

    def get(self, folder_id: str) -> Optional[AssetFolder]: ...

    def count(self) -> int: ...

    def add(self, folder: AssetFolder) -> AssetFolder: ...

    def save(self, folder: AssetFolder) -> AssetFolder: ...

    def delete(self, folder_id: str) -> bool: ...

    def clear_parent(self, parent_id: str) -> int:
        """Remonte à la racine les sous-dossiers de ``parent_id``."""
        ...


class UnitOfWork(Protocol):
    assets: AssetRepository
    folders: FolderRepository

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
