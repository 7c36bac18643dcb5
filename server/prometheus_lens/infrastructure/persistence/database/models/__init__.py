from __future__ import annotations
"""server/prometheus_lens/infrastructure/persistence/database/models/__init__.py
~~~~~~~~~~~~~~~~~~~~~~~~
Modèles ORM (register for Alembic).
"""

from .asset_folder import AssetFolderRecord
from .asset import AssetRecord

__all__ = ["AssetFolderRecord", "AssetRecord"]
