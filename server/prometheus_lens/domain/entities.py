from __future__ import annotations
"""server/prometheus_lens/domain/entities.py
~~~~~~~~~~~~~~~~~~~~~~~~
Entités métier (indépendantes du stockage).
"""

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional


class AssetType(str, Enum):
    SERVER = "Server"
    NETWORK = "Network"
    APPLICATION = "Application"
    DATABASE = "Database"
    KUBERNETES = "Kubernetes"
    POSTGRESQL = "PostgreSQL"
    MYSQL = "MySQL"
    MONGODB = "MongoDB"
    UBUNTU_SERVER = "Ubuntu Server"
    WINDOWS_SERVER = "Windows Server"
    DOCKER = "Docker"

    @classmethod
    def values(cls) -> list[str]:
        return [t.value for t in cls]


class AssetStatus(str, Enum):
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    ERROR = "error"
    PENDING = "pending"


@dataclass
class AssetFolder:
    id: str
    name: str
    parent_id: Optional[str] = None


@dataclass
class Asset:
    id: str
    name: str
    type: str
    status: str
    last_checked: dt.datetime
    grafana_link: Optional[str] = None
    configuration: dict[str, Any] = field(default_factory=dict)
    tags: list[str] = field(default_factory=list)
    folder_id: Optional[str] = None

    def mark(self, status: AssetStatus | str, at: dt.datetime) -> None:
        """Statut et last_checked bougent toujours ensemble."""
        self.status = AssetStatus(status).value
        self.last_checked = at


def normalize_tags(tags: Iterable[str] | str | None) -> list[str]:
    """
    Tags = ensemble de chaînes : espaces retirés, vides ignorés, doublons fusionnés.
    Accepte aussi la forme "a, b, c" du formulaire. Le résultat est trié.
    """
    if tags is None:
        return []
    if isinstance(tags, str):
        tags = tags.split(",")
    return sorted({t.strip() for t in tags if isinstance(t, str) and t.strip()})
