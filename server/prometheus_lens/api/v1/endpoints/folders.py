from __future__ import annotations
"""
server/prometheus_lens/api/v1/endpoints/folders.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
CRUD des dossiers d'assets.

Suppression : les assets du dossier sont détachés et les sous-dossiers
remontent à la racine (aucune suppression en cascade).
"""

from fastapi import APIRouter, Depends, status

from prometheus_lens.api.deps import get_folder_service
from prometheus_lens.api.schemas.folder import FolderIn
from prometheus_lens.api.v1.serializers.folder import serialize_folder
from prometheus_lens.application.services.folder_service import FolderService

router = APIRouter(prefix="/folders", tags=["folders"])


@router.get("")
def list_folders(svc: FolderService = Depends(get_folder_service)) -> list[dict]:
    return [serialize_folder(f) for f in svc.list_folders()]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_folder(payload: FolderIn, svc: FolderService = Depends(get_folder_service)) -> dict:
    return serialize_folder(svc.create_folder(payload.name, payload.parent_id))


@router.get("/{folder_id}")
def get_folder(folder_id: str, svc: FolderService = Depends(get_folder_service)) -> dict:
    return serialize_folder(svc.get_folder(folder_id))


@router.put("/{folder_id}")
def update_folder(folder_id: str, payload: FolderIn, svc: FolderService = Depends(get_folder_service)) -> dict:
    return serialize_folder(svc.update_folder(folder_id, payload.name, payload.parent_id))


@router.delete("/{folder_id}")
def delete_folder(folder_id: str, svc: FolderService = Depends(get_folder_service)) -> dict:
    svc.delete_folder(folder_id)
    return {"success": True}
