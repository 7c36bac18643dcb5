from __future__ import annotations
"""server/prometheus_lens/infrastructure/persistence/repositories/in_memory.py
~~~~~~~~~~~~~~~~~~~~~~~~
Implémentation mémoire des repos + UnitOfWork (tests de services, démo sans DB).

Sémantique transactionnelle : les écritures vont dans l'état courant ;
`commit()` fige un instantané, `rollback()` restaure le dernier instantané.
Les objets rendus sont des copies : modifier un asset lu ne change rien
tant qu'il n'est pas passé à `save()`.
"""
import copy
from typing import Optional

from prometheus_lens.domain.entities import Asset, AssetFolder


class InMemoryStore:
    def __init__(self) -> None:
        self.assets: dict[str, Asset] = {}
        self.folders: dict[str, AssetFolder] = {}


class InMemoryAssetRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def list(self) -> list[Asset]:
        rows = sorted(self.store.assets.values(), key=lambda a: (a.name, a.id))
        return [copy.deepcopy(a) for a in rows]

    def get(self, asset_id: str) -> Optional[Asset]:
        a = self.store.assets.get(asset_id)
        return copy.deepcopy(a) if a else None

    def add(self, asset: Asset) -> Asset:
        if asset.id in self.store.assets:
            raise KeyError(f"duplicate asset id {asset.id}")
        self.store.assets[asset.id] = copy.deepcopy(asset)
        return copy.deepcopy(asset)

    def save(self, asset: Asset) -> Asset:
        if asset.id not in self.store.assets:
            raise LookupError(f"asset {asset.id} does not exist")
        self.store.assets[asset.id] = copy.deepcopy(asset)
        return copy.deepcopy(asset)

    def delete(self, asset_id: str) -> bool:
        return self.store.assets.pop(asset_id, None) is not None

    def clear_folder(self, folder_id: str) -> int:
        n = 0
        for a in self.store.assets.values():
            if a.folder_id == folder_id:
                a.folder_id = None
                n += 1
        return n


class InMemoryFolderRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def list(self) -> list[AssetFolder]:
        rows = sorted(self.store.folders.values(), key=lambda f: (f.name, f.id))
        return [copy.deepcopy(f) for f in rows]

    def get(self, folder_id: str) -> Optional[AssetFolder]:
        f = self.store.folders.get(folder_id)
        return copy.deepcopy(f) if f else None

    def count(self) -> int:
        return len(self.store.folders)

    def add(self, folder: AssetFolder) -> AssetFolder:
        if folder.id in self.store.folders:
            raise KeyError(f"duplicate folder id {folder.id}")
        self.store.folders[folder.id] = copy.deepcopy(folder)
        return copy.deepcopy(folder)

    def save(self, folder: AssetFolder) -> AssetFolder:
        if folder.id not in self.store.folders:
            raise LookupError(f"folder {folder.id} does not exist")
        self.store.folders[folder.id] = copy.deepcopy(folder)
        return copy.deepcopy(folder)

    def delete(self, folder_id: str) -> bool:
        return self.store.folders.pop(folder_id, None) is not None

    def clear_parent(self, parent_id: str) -> int:
        n = 0
        for f in self.store.folders.values():
            if f.parent_id == parent_id:
                f.parent_id = None
                n += 1
        return n


class InMemoryUnitOfWork:
    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()
        self.assets = InMemoryAssetRepository(self.store)
        self.folders = InMemoryFolderRepository(self.store)
        self.commits = 0
        self.rollbacks = 0
        self._snapshot = self._take_snapshot()

    def _take_snapshot(self) -> tuple[dict[str, Asset], dict[str, AssetFolder]]:
        return copy.deepcopy(self.store.assets), copy.deepcopy(self.store.folders)

    def commit(self) -> None:
        self._snapshot = self._take_snapshot()
        self.commits += 1

    def rollback(self) -> None:
        assets, folders = self._snapshot
        self.store.assets = copy.deepcopy(assets)
        self.store.folders = copy.deepcopy(folders)
        self.rollbacks += 1
