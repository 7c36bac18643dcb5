# server/tests/unit/conftest.py
# ─────────────────────────────────────────────────────────────────────────────
# Conftest pour les TESTS UNITAIRES.
#
# Objectifs :
# - Garantir qu'aucun test unitaire ne touche le réseau : `http_get` (sonde)
#   et `http_post` (reload Prometheus) sont remplacés par défaut par des
#   fakes qui échouent bruyamment. Les tests qui en ont besoin les
#   re-patchent avec leur propre réponse.
# - Fournir `fake_http` pour patcher ces wrappers en une ligne.
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

import importlib

import pytest

probe_mod = importlib.import_module("prometheus_lens.application.services.health_probe_service")
prom_mod = importlib.import_module("prometheus_lens.application.services.prometheus_config_service")


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "OK") -> None:
        self.status_code = status_code
        self.text = text


@pytest.fixture(autouse=True)
def _no_network(monkeypatch):
    def _refuse(url, *a, **kw):  # noqa: ARG001
        raise AssertionError(f"Unexpected network call in unit test: {url}")

    monkeypatch.setattr(probe_mod, "http_get", _refuse, raising=True)
    monkeypatch.setattr(prom_mod, "http_post", _refuse, raising=True)


@pytest.fixture
def fake_http(monkeypatch):
    """
    fake_http.get(status=200) / fake_http.post(status=200) installent un fake
    et renvoient la liste des URLs appelées.
    """
    class _Fake:
        def get(self, status: int = 200, exc: Exception | None = None) -> list[str]:
            calls: list[str] = []

            def _get(url, timeout=5):  # noqa: ARG001
                calls.append(url)
                if exc is not None:
                    raise exc
                return FakeResponse(status)

            monkeypatch.setattr(probe_mod, "http_get", _get, raising=True)
            return calls

        def post(self, status: int = 200, exc: Exception | None = None) -> list[str]:
            calls: list[str] = []

            def _post(url, timeout=10):  # noqa: ARG001
                calls.append(url)
                if exc is not None:
                    raise exc
                return FakeResponse(status)

            monkeypatch.setattr(prom_mod, "http_post", _post, raising=True)
            return calls

    return _Fake()
