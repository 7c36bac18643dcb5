# coding: utf-8
# server/prometheus_lens/api/v1/serializers/asset.py
"""
Sérialise un Asset (entité métier) en dictionnaire JSON prêt à exposer.
"""

from __future__ import annotations
from typing import Any, Dict, TYPE_CHECKING

from prometheus_lens.core.utils.datetime import age_in_seconds, as_utc
from prometheus_lens.domain.scrape_config import scrape_job_kind

if TYPE_CHECKING:
    from prometheus_lens.domain.entities import Asset


def serialize_asset(a: Asset) -> Dict[str, Any]:
    last_checked = as_utc(a.last_checked)
    return {
        # Identité
        "id": a.id,
        "name": a.name,
        "type": a.type,

        # État courant (statut + horodatage bougent ensemble)
        "status": a.status,
        "lastChecked": last_checked.isoformat() if last_checked else None,
        "lastCheckedAgeSec": age_in_seconds(last_checked),

        "grafanaLink": a.grafana_link,
        "configuration": a.configuration or {},
        "configurationKind": scrape_job_kind(a.configuration),
        "tags": list(a.tags or []),
        "folderId": a.folder_id,
    }
