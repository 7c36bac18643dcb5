# server/tests/unit/test_health_probe_service.py
# -------------------------------------------------------------------
# Sonde de santé : `http_get` est monkeypatché (aucun appel réseau).
# -------------------------------------------------------------------
import importlib
import time

import httpx
import pytest

from prometheus_lens.application.services.asset_service import AssetService
from prometheus_lens.domain.errors import NotFoundError

pytestmark = pytest.mark.unit

mod = importlib.import_module("prometheus_lens.application.services.health_probe_service")


def _asset(uow, target=None, **kw):
    cfg = {"job_name": "t", "static_configs": [{"targets": [target]}]} if target else kw.pop("configuration", {})
    return AssetService(uow).create_asset("probe me", "Server", configuration=cfg)


@pytest.mark.parametrize(
    "target, expected",
    [
        ("10.0.0.5:9100", "http://10.0.0.5:9100/metrics"),
        ("http://app:8080", "http://app:8080/metrics"),
        ("https://app:8443/", "https://app:8443/metrics"),
        ("http://app/metrics", "http://app/metrics"),
        (" host:1/metrics ", "http://host:1/metrics"),
    ],
)
def test_normalize_target_url(target, expected):
    assert mod.normalize_target_url(target) == expected


def test_connected_on_2xx(memory_uow, fake_http):
    calls = fake_http.get(status=204)
    a = _asset(memory_uow, "10.0.0.5:9100")

    res = mod.probe_asset(memory_uow, a.id)

    assert calls == ["http://10.0.0.5:9100/metrics"]
    assert res.status == "connected"
    assert res.message == "Target http://10.0.0.5:9100/metrics is reachable."
    assert memory_uow.assets.get(a.id).status == "connected"


def test_disconnected_on_non_2xx(memory_uow, fake_http):
    fake_http.get(status=503)
    a = _asset(memory_uow, "h:1")
    res = mod.probe_asset(memory_uow, a.id)
    assert res.status == "disconnected"
    assert res.message == "Target http://h:1/metrics returned status 503"


@pytest.mark.parametrize(
    "configuration",
    [
        {},
        {"job_name": "x", "static_configs": []},
        {"job_name": "k", "kubernetes_sd_configs": [{"role": "pod"}]},
    ],
)
def test_no_target_means_error_without_network(memory_uow, configuration):
    # _no_network (conftest) fait échouer tout appel à http_get
    a = _asset(memory_uow, configuration=configuration)
    before = memory_uow.assets.get(a.id).last_checked

    res = mod.probe_asset(memory_uow, a.id)

    assert res.status == "error"
    assert res.message == "No valid target found in configuration."
    assert res.url is None
    stored = memory_uow.assets.get(a.id)
    assert stored.status == "error"
    assert stored.last_checked >= before


def test_timeout_is_reported(memory_uow, monkeypatch):
    def _slow(url, timeout=5):  # noqa: ARG001
        time.sleep(1.0)
        return object()

    monkeypatch.setattr(mod, "http_get", _slow)
    a = _asset(memory_uow, "slow:9100")

    started = time.perf_counter()
    res = mod.probe_asset(memory_uow, a.id, timeout=0.05)
    elapsed = time.perf_counter() - started

    assert elapsed < 0.9
    assert res.status == "error"
    assert res.message == "Failed to reach target: Timeout after 0.05s"
    assert memory_uow.assets.get(a.id).status == "error"


def test_httpx_timeout_is_reported_as_timeout(memory_uow, fake_http):
    fake_http.get(exc=httpx.ReadTimeout("read timed out"))
    a = _asset(memory_uow, "h:1")
    res = mod.probe_asset(memory_uow, a.id, timeout=3)
    assert res.message == "Failed to reach target: Timeout after 3s"


def test_transport_error(memory_uow, fake_http):
    fake_http.get(exc=httpx.ConnectError("connection refused"))
    a = _asset(memory_uow, "h:1")
    res = mod.probe_asset(memory_uow, a.id)
    assert res.status == "error"
    assert res.message == "Failed to reach target: connection refused"


def test_unknown_asset(memory_uow):
    with pytest.raises(NotFoundError):
        mod.probe_asset(memory_uow, "asset-nope")


def test_loosely_typed_job_is_still_probed(memory_uow, fake_http):
    calls = fake_http.get(status=200)
    cfg = {
        "job_name": "snmp",
        "params": {"module": "if_mib"},
        "static_configs": [{"targets": ["h:9100", 42], "labels": {"rack": 3}}],
    }
    a = _asset(memory_uow, configuration=cfg)

    res = mod.probe_asset(memory_uow, a.id)

    assert calls == ["http://h:9100/metrics"]
    assert res.status == "connected"


def test_connection_is_released_during_network_wait(uow, monkeypatch):
    a = _asset(uow, "h:9100")
    seen = []

    def _get(url, timeout=5):  # noqa: ARG001
        seen.append(uow.db.in_transaction())
        return httpx.Response(200)

    monkeypatch.setattr(mod, "http_get", _get)

    res = mod.probe_asset(uow, a.id)

    assert seen == [False]
    assert res.status == "connected"
    assert uow.assets.get(a.id).status == "connected"
