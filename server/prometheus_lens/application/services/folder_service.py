from __future__ import annotations

"""server/prometheus_lens/application/services/folder_service.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Gestion de l'arborescence des dossiers d'assets (forêt, plusieurs racines).

Règles :
- nom non vide (après trim) ;
- parent optionnel, mais s'il est fourni : chaîne non vide, dossier existant,
  jamais le dossier lui-même, jamais un de ses descendants (pas de cycle) ;
- suppression = détachement : les assets du dossier perdent leur folder_id,
  les sous-dossiers remontent à la racine (parent_id = NULL). Pas de
  suppression récursive. Le tout dans UNE transaction.
"""

import logging
from typing import Any, Optional

from prometheus_lens.core.utils.ids import FOLDER_PREFIX, new_id
from prometheus_lens.domain.entities import AssetFolder
from prometheus_lens.domain.errors import (
    CircularDependencyError,
    InvalidParentChainError,
    NotFoundError,
    ValidationError,
)
from prometheus_lens.domain.repositories import UnitOfWork

logger = logging.getLogger(__name__)


def _validate_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Folder name is required and must be a non-empty string", field="name")
    return name.strip()


def _validate_parent_id(parent_id: Any) -> Optional[str]:
    if parent_id is None:
        return None
    if not isinstance(parent_id, str) or not parent_id.strip():
        raise ValidationError("Parent ID must be a non-empty string if provided", field="parentId")
    return parent_id.strip()


class FolderService:
    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    # ── Lecture ──────────────────────────────────────────────────────────────

    def list_folders(self) -> list[AssetFolder]:
        return self.uow.folders.list()

    def get_folder(self, folder_id: str) -> AssetFolder:
        folder = self.uow.folders.get(folder_id)
        if folder is None:
            raise NotFoundError("Folder", folder_id)
        return folder

    # ── Écriture ─────────────────────────────────────────────────────────────

    def create_folder(self, name: Any, parent_id: Any = None) -> AssetFolder:
        name = _validate_name(name)
        parent_id = _validate_parent_id(parent_id)
        if parent_id is not None and self.uow.folders.get(parent_id) is None:
            raise InvalidParentChainError(f"Parent folder {parent_id} does not exist")

        folder = self.uow.folders.add(AssetFolder(id=new_id(FOLDER_PREFIX), name=name, parent_id=parent_id))
        self.uow.commit()
        logger.info("Dossier créé: %s (%s), parent=%s", folder.name, folder.id, folder.parent_id)
        return folder

    def update_folder(self, folder_id: str, name: Any, parent_id: Any = None) -> AssetFolder:
        """
        Renomme / déplace un dossier. ``parent_id=None`` le remonte à la racine.
        La première règle violée est renvoyée (ordre : nom, parent, auto-parenté,
        existence, chaîne des ancêtres).
        """
        name = _validate_name(name)
        parent_id = _validate_parent_id(parent_id)
        if parent_id is not None and parent_id == folder_id:
            raise ValidationError("A folder cannot be its own parent", field="parentId")

        folder = self.get_folder(folder_id)
        if parent_id is not None:
            self._check_parent_chain(folder_id, parent_id)

        folder.name = name
        folder.parent_id = parent_id
        folder = self.uow.folders.save(folder)
        self.uow.commit()
        logger.info("Dossier mis à jour: %s (%s), parent=%s", folder.name, folder.id, folder.parent_id)
        return folder

    def delete_folder(self, folder_id: str) -> None:
        self.get_folder(folder_id)
        try:
            detached_assets = self.uow.assets.clear_folder(folder_id)
            detached_children = self.uow.folders.clear_parent(folder_id)
            self.uow.folders.delete(folder_id)
            self.uow.commit()
        except Exception:
            self.uow.rollback()
            logger.exception("Suppression du dossier %s annulée (rollback)", folder_id)
            raise
        logger.info(
            "Dossier supprimé: %s (%d asset(s) détaché(s), %d sous-dossier(s) remonté(s) à la racine)",
            folder_id, detached_assets, detached_children,
        )

    # ── Interne ──────────────────────────────────────────────────────────────

    def _check_parent_chain(self, folder_id: str, parent_id: str) -> None:
        """
        Remonte la chaîne depuis ``parent_id`` jusqu'à une racine.
        - on croise ``folder_id``      -> cycle
        - un maillon n'existe pas      -> chaîne invalide
        - plus de sauts que de dossiers -> cycle déjà présent en base
        """
        max_hops = self.uow.folders.count()
        current: Optional[str] = parent_id
        hops = 0
        while current is not None:
            if current == folder_id:
                raise CircularDependencyError()
            ancestor = self.uow.folders.get(current)
            if ancestor is None:
                raise InvalidParentChainError(f"Parent folder {current} does not exist")
            current = ancestor.parent_id
            hops += 1
            if hops > max_hops:
                raise CircularDependencyError("Circular parent folder dependency detected in existing folders")
