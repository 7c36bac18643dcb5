from __future__ import annotations

"""server/prometheus_lens/application/services/prometheus_config_service.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Agrégation de la configuration Prometheus :

- construit le document complet (global + scrape_configs + alerting) à partir
  des assets dont la configuration n'est pas vide (ordre : nom, puis id)
- rend le YAML (PyYAML, ordre des clés conservé)
- écrit le fichier puis déclenche ``POST <prometheus>/-/reload``

Échec d'écriture -> PrometheusConfigWriteError (pas de reload).
Échec du reload  -> PrometheusReloadError ; le fichier écrit n'est pas restauré.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

import httpx
import yaml

from prometheus_lens.core.config import settings
from prometheus_lens.core.metrics import PROMETHEUS_RELOADS
from prometheus_lens.domain.entities import Asset
from prometheus_lens.domain.errors import PrometheusConfigWriteError, PrometheusReloadError
from prometheus_lens.domain.repositories import UnitOfWork

logger = logging.getLogger(__name__)

__all__ = [
    "ReloadResult",
    "build_prometheus_config",
    "render_prometheus_yaml",
    "write_config_file",
    "reload_prometheus",
    "write_and_reload",
    "http_post",  # ← exposé pour les tests (monkeypatch)
]


@dataclass(frozen=True)
class ReloadResult:
    path: str
    jobs: int


def http_post(url: str, timeout: int | float = 10):
    """POST sans corps ; renvoie un objet possédant au minimum `.status_code`."""
    with httpx.Client(timeout=timeout) as client:
        return client.post(url)


def build_prometheus_config(
    assets: Iterable[Asset],
    *,
    scrape_interval: Optional[str] = None,
    evaluation_interval: Optional[str] = None,
    alertmanager_target: Optional[str] = None,
) -> dict[str, Any]:
    """Document prometheus.yml complet ; les configurations sont reprises telles quelles."""
    scrape_configs = [dict(a.configuration) for a in assets if a.configuration]
    return {
        "global": {
            "scrape_interval": scrape_interval or settings.SCRAPE_INTERVAL,
            "evaluation_interval": evaluation_interval or settings.EVALUATION_INTERVAL,
        },
        "scrape_configs": scrape_configs,
        "alerting": {
            "alertmanagers": [
                {"static_configs": [{"targets": [alertmanager_target or settings.ALERTMANAGER_TARGET]}]}
            ]
        },
    }


def render_prometheus_yaml(document: dict[str, Any]) -> str:
    return yaml.safe_dump(document, sort_keys=False, default_flow_style=False, allow_unicode=True)


def write_config_file(text: str, path: str | os.PathLike[str]) -> str:
    target = Path(path)
    try:
        target.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise PrometheusConfigWriteError(f"Failed to write Prometheus configuration to {target}: {exc}") from exc
    return str(target)


def reload_prometheus(prometheus_url: Optional[str] = None, *, timeout: Optional[float] = None) -> None:
    url = f"{prometheus_url.rstrip('/')}/-/reload" if prometheus_url else settings.prometheus_reload_url
    timeout = timeout if timeout is not None else settings.PROMETHEUS_RELOAD_TIMEOUT_SECONDS
    try:
        resp = http_post(url, timeout=timeout)
    except Exception as exc:  # noqa: BLE001
        raise PrometheusReloadError(
            f"Configuration written but Prometheus reload failed: {exc}"
        ) from exc
    code = int(getattr(resp, "status_code", 0) or 0)
    if not 200 <= code < 300:
        raise PrometheusReloadError(
            f"Configuration written but Prometheus reload failed: HTTP {code}"
        )


def write_and_reload(
    uow: UnitOfWork,
    *,
    config_path: Optional[str] = None,
    prometheus_url: Optional[str] = None,
) -> ReloadResult:
    assets = uow.assets.list()
    document = build_prometheus_config(assets)
    path = config_path or settings.PROMETHEUS_CONFIG_PATH
    jobs = len(document["scrape_configs"])

    try:
        written = write_config_file(render_prometheus_yaml(document), path)
    except PrometheusConfigWriteError:
        PROMETHEUS_RELOADS.labels(outcome="write_failed").inc()
        logger.exception("Écriture de %s impossible", path)
        raise

    try:
        reload_prometheus(prometheus_url)
    except PrometheusReloadError:
        PROMETHEUS_RELOADS.labels(outcome="reload_failed").inc()
        logger.exception("Reload Prometheus en échec (fichier %s déjà écrit)", written)
        raise

    PROMETHEUS_RELOADS.labels(outcome="success").inc()
    logger.info("prometheus.yml régénéré (%d job(s)) et Prometheus rechargé", jobs)
    return ReloadResult(path=written, jobs=jobs)
