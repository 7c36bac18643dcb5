from __future__ import annotations
"""server/prometheus_lens/core/metrics.py
~~~~~~~~~~~~~~~~~~~~~~~~
Métriques internes du service (prometheus_client, registre par défaut).
Exposées en texte par GET /api/v1/metrics.
"""
from prometheus_client import Counter

HEALTH_PROBES = Counter(
    "lens_health_probes_total",
    "Sondes de santé exécutées, par statut résultant",
    ["status"],
)

PROMETHEUS_RELOADS = Counter(
    "lens_prometheus_reloads_total",
    "Régénérations de prometheus.yml + reload, par issue",
    ["outcome"],
)
