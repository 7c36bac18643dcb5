# coding: utf-8
# server/prometheus_lens/core/utils/datetime.py
"""server/prometheus_lens/core/utils/datetime.py
~~~~~~~~~~~~~~~~~~~~~~~~
Utilitaires pour la gestion des dates et heures.
"""

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Horodatage UTC 'aware'."""
    return datetime.now(timezone.utc)


def as_utc(d: Optional[datetime]) -> Optional[datetime]:
    """Retourne d en timezone UTC 'aware' (tolère None et les datetimes naïfs de SQLite)."""
    if d is None:
        return None
    if d.tzinfo is None:
        return d.replace(tzinfo=timezone.utc)
    return d.astimezone(timezone.utc)


def age_in_seconds(dt: Optional[datetime]) -> Optional[int]:
    """Retourne l’âge (en secondes) d’un datetime UTC, ou None si absent."""
    if not dt:
        return None
    delta = utcnow() - as_utc(dt)
    return int(delta.total_seconds())
