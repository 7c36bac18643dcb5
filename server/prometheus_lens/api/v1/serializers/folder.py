# server/prometheus_lens/api/v1/serializers/folder.py
"""
Sérialise un AssetFolder en dictionnaire JSON.
"""

from __future__ import annotations
from typing import Any, Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from prometheus_lens.domain.entities import AssetFolder


def serialize_folder(f: AssetFolder) -> Dict[str, Any]:
    return {"id": f.id, "name": f.name, "parentId": f.parent_id}
