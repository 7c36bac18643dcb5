# server/prometheus_lens/core/utils/ids.py
"""
Génération des identifiants d'assets et de dossiers.

Format : ``<prefix>-<timestamp ms>-<suffixe aléatoire>`` (ex: ``asset-1718000000000-3f9a1c``).
Le timestamp garde un ordre de création lisible ; le suffixe écarte les
collisions quand deux créations tombent dans la même milliseconde.
"""

from __future__ import annotations

import secrets
import time

ASSET_PREFIX = "asset"
FOLDER_PREFIX = "folder"


def new_id(prefix: str) -> str:
    return f"{prefix}-{time.time_ns() // 1_000_000}-{secrets.token_hex(3)}"
