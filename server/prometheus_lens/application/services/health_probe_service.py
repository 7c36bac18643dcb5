from __future__ import annotations

"""server/prometheus_lens/application/services/health_probe_service.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Sonde de santé « à la demande » d'un asset :

- cible principale = première target du premier groupe ``static_configs``
- normalisation de l'URL (schéma http:// par défaut, suffixe /metrics)
- GET via le *wrapper* patchable ``http_get``, mis en course contre un minuteur
- statut + last_checked écrits dans TOUS les cas (connected / disconnected / error)

Notes :
- La requête perdante n'est pas annulée : on l'abandonne dans son thread.
- ``http_get`` est exposé au niveau module pour que les tests le monkeypatchent.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass
from typing import Optional

import httpx

from prometheus_lens.core.config import settings
from prometheus_lens.core.metrics import HEALTH_PROBES
from prometheus_lens.core.utils.datetime import utcnow
from prometheus_lens.domain.entities import AssetStatus
from prometheus_lens.domain.errors import NotFoundError
from prometheus_lens.domain.repositories import UnitOfWork
from prometheus_lens.domain.scrape_config import primary_target

logger = logging.getLogger(__name__)

NO_TARGET_MESSAGE = "No valid target found in configuration."
METRICS_SUFFIX = "/metrics"

__all__ = [
    "ProbeResult",
    "normalize_target_url",
    "probe_asset",
    "http_get",  # ← exposé pour les tests (monkeypatch)
]


@dataclass(frozen=True)
class ProbeResult:
    status: str
    message: str
    url: Optional[str] = None


def http_get(url: str, timeout: int | float = 5):
    """
    Effectue la requête HTTP et renvoie un objet possédant au minimum `.status_code`.
    Conçu pour être *monkeypatché* dans les tests.
    """
    with httpx.Client(timeout=timeout, follow_redirects=True) as client:
        return client.get(url)


def normalize_target_url(target: str) -> str:
    """'10.0.0.5:9100' -> 'http://10.0.0.5:9100/metrics'."""
    url = target.strip()
    if not url.startswith(("http://", "https://")):
        url = f"http://{url}"
    if not url.endswith(METRICS_SUFFIX):
        if url.endswith("/"):
            url = url[:-1]
        url = url + METRICS_SUFFIX
    return url


def _format_seconds(timeout: float) -> str:
    return f"{timeout:g}s"


def _race(url: str, timeout: float):
    """Lance http_get dans un thread et n'attend pas plus de ``timeout`` secondes."""
    pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="lens-probe")
    try:
        future = pool.submit(http_get, url, timeout)
        return future.result(timeout=timeout)
    finally:
        pool.shutdown(wait=False)


def _record(uow: UnitOfWork, asset_id: str, status: AssetStatus) -> None:
    asset = uow.assets.get(asset_id)
    if asset is None:
        raise NotFoundError("Asset", asset_id)
    asset.mark(status, utcnow())
    uow.assets.save(asset)
    uow.commit()
    HEALTH_PROBES.labels(status=status.value).inc()


def probe_asset(uow: UnitOfWork, asset_id: str, *, timeout: float | None = None) -> ProbeResult:
    """
    Sonde l'asset et persiste le statut résultant.
    Lève NotFoundError si l'asset n'existe pas ; les erreurs réseau deviennent
    un statut ``error`` (jamais une exception).
    """
    timeout = timeout if timeout is not None else settings.HEALTH_CHECK_TIMEOUT_SECONDS

    asset = uow.assets.get(asset_id)
    if asset is None:
        raise NotFoundError("Asset", asset_id)

    target = primary_target(asset.configuration)
    if target is None:
        _record(uow, asset_id, AssetStatus.ERROR)
        logger.warning("Sonde %s: aucune cible exploitable", asset_id)
        return ProbeResult(status=AssetStatus.ERROR.value, message=NO_TARGET_MESSAGE)

    url = normalize_target_url(target)
    # lecture seule jusqu'ici : on libère la connexion avant l'attente réseau
    uow.rollback()
    try:
        resp = _race(url, timeout)
    except (FutureTimeoutError, httpx.TimeoutException):
        status, message = AssetStatus.ERROR, f"Failed to reach target: Timeout after {_format_seconds(timeout)}"
    except Exception as exc:  # noqa: BLE001
        status, message = AssetStatus.ERROR, f"Failed to reach target: {exc}"
    else:
        code = int(getattr(resp, "status_code", 0) or 0)
        if 200 <= code < 300:
            status, message = AssetStatus.CONNECTED, f"Target {url} is reachable."
        else:
            status, message = AssetStatus.DISCONNECTED, f"Target {url} returned status {code}"

    _record(uow, asset_id, status)
    logger.info("Sonde %s -> %s (%s)", asset_id, status.value, message)
    return ProbeResult(status=status.value, message=message, url=url)
