from __future__ import annotations
"""server/prometheus_lens/infrastructure/persistence/database/models/asset_folder.py
~~~~~~~~~~~~~~~~~~~~~~~~
Table asset_folders (forêt : parent_id auto-référent, ON DELETE SET NULL).
"""
from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column
from prometheus_lens.infrastructure.persistence.database.base import Base


class AssetFolderRecord(Base):
    __tablename__ = "asset_folders"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    parent_id: Mapped[str | None] = mapped_column(
        String(255),
        ForeignKey("asset_folders.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
