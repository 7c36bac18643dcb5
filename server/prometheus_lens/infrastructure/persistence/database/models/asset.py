from __future__ import annotations
"""server/prometheus_lens/infrastructure/persistence/database/models/asset.py
~~~~~~~~~~~~~~~~~~~~~~~~
Table assets.

configuration : JSONB sous PostgreSQL, JSON ailleurs (SQLite en tests).
tags          : TEXT[] sous PostgreSQL, JSON ailleurs.
"""
import datetime as dt
from typing import Any

from sqlalchemy import JSON, DateTime, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlalchemy.orm import Mapped, mapped_column
from prometheus_lens.infrastructure.persistence.database.base import Base

ConfigurationType = JSON().with_variant(JSONB(), "postgresql")
TagsType = JSON().with_variant(ARRAY(Text()), "postgresql")


class AssetRecord(Base):
    __tablename__ = "assets"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="pending")
    last_checked: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: dt.datetime.now(dt.timezone.utc)
    )
    grafana_link: Mapped[str | None] = mapped_column(Text, nullable=True)
    configuration: Mapped[dict[str, Any] | None] = mapped_column(ConfigurationType, nullable=True)
    tags: Mapped[list[str] | None] = mapped_column(TagsType, nullable=True)
    folder_id: Mapped[str | None] = mapped_column(
        String(255),
        ForeignKey("asset_folders.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
