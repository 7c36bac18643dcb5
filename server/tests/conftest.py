# server/tests/conftest.py
"""
Conftest *global* pour toute la suite de tests.

Points clés :
- DATABASE_URL forcée sur SQLite in-memory AVANT tout import de prometheus_lens
  (Settings() est instancié à l'import de core.config).
- Fournit des fixtures communes (api_base, session_retry) pour l'intégration.
- Pour les tests @unit uniquement :
  - Monte la DB SQLite in-memory partagée (StaticPool) via init_db().
  - Fournit `Session` (sessionmaker), `uow` (SqlAlchemyUnitOfWork) et
    `memory_uow` (InMemoryUnitOfWork).
  - Purge toutes les tables entre deux tests.
"""

import importlib
import os
import sys
import time

import pytest
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


# ============================================================================
# Helpers
# ============================================================================
def _is_unit(request: pytest.FixtureRequest) -> bool:
    """True si le test courant est marqué @pytest.mark.unit."""
    return request.node.get_closest_marker("unit") is not None


def pytest_configure(config) -> None:
    """
    S'exécute avant la collecte → parfait pour poser les ENV lues par Settings().
    """
    os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
    os.environ.setdefault("PROMETHEUS_URL", "http://prometheus.invalid:9090")
    os.environ.setdefault("HEALTH_CHECK_TIMEOUT_SECONDS", "2")

    # Si core.config a déjà été importé, on le recharge pour ré-instancier Settings().
    if "prometheus_lens.core.config" in sys.modules:
        importlib.reload(sys.modules["prometheus_lens.core.config"])


# ============================================================================
# Fixtures communes : API + requests.Session avec retries
# ============================================================================
@pytest.fixture(scope="session")
def api_base() -> str:
    return os.getenv("API", "http://localhost:8000")


@pytest.fixture(scope="session")
def session_retry() -> requests.Session:
    """Session HTTP robuste avec backoff & retries (utile pour l'intégration)."""
    s = requests.Session()
    retries = Retry(
        total=5,
        backoff_factor=0.5,
        status_forcelist=(500, 502, 503, 504),
        allowed_methods=frozenset({"GET", "POST", "PUT", "DELETE"}),
        raise_on_status=False,
    )
    s.mount("http://", HTTPAdapter(max_retries=retries))
    s.mount("https://", HTTPAdapter(max_retries=retries))
    return s


@pytest.fixture
def wait():
    """Poll une fonction jusqu'à ce qu'elle renvoie une valeur truthy."""
    def _wait(fn, timeout=30, every=1):
        deadline = time.time() + timeout
        while time.time() < deadline:
            try:
                val = fn()
            except requests.RequestException:
                val = None
            if val:
                return val
            time.sleep(every)
        return None
    return _wait


# ============================================================================
# UNIT-ONLY: DB SQLite in-memory partagée
# ============================================================================
@pytest.fixture(scope="session")
def _sqlite_engine_unit():
    """
    Engine applicatif (DATABASE_URL SQLite in-memory → StaticPool + FK ON),
    schéma créé par init_db() comme au démarrage de l'API.
    """
    from prometheus_lens.infrastructure.persistence.database import session as db_session

    db_session.init_db()
    return db_session.init_engine()


@pytest.fixture(scope="session")
def _Session_unit(_sqlite_engine_unit):
    from prometheus_lens.infrastructure.persistence.database.session import init_sessionmaker

    return init_sessionmaker()


@pytest.fixture
def Session(request, _Session_unit):
    """
    sessionmaker à utiliser comme `with Session() as s:` dans les tests unitaires.
    Skippé s'il est injecté dans un test non marqué @unit.
    """
    if not _is_unit(request):
        pytest.skip("Session fixture is only available for unit tests")
    return _Session_unit


@pytest.fixture(autouse=True)
def _clear_db_between_unit_tests(request, _Session_unit):
    """
    Après chaque test unitaire, on vide toutes les tables.
    ⚠️ Générateur : doit 'yield' aussi hors unit.
    """
    if not _is_unit(request):
        yield
        return

    yield
    from prometheus_lens.infrastructure.persistence.database.base import Base
    with _Session_unit() as s:
        for table in reversed(Base.metadata.sorted_tables):
            s.execute(table.delete())
        s.commit()


@pytest.fixture
def uow(Session):
    """UnitOfWork SQLAlchemy sur une session SQLite (fermée en fin de test)."""
    from prometheus_lens.infrastructure.persistence.repositories.unit_of_work import SqlAlchemyUnitOfWork

    with Session() as s:
        yield SqlAlchemyUnitOfWork(s)


@pytest.fixture
def memory_uow():
    from prometheus_lens.infrastructure.persistence.repositories.in_memory import InMemoryUnitOfWork

    return InMemoryUnitOfWork()


@pytest.fixture
def client(request, _Session_unit):
    """TestClient FastAPI branché sur la DB SQLite in-memory."""
    if not _is_unit(request):
        pytest.skip("client fixture is only available for unit tests")
    from fastapi.testclient import TestClient
    from prometheus_lens.main import app

    with TestClient(app) as c:
        yield c


# ============================================================================
# Payload factories simples (utiles pour tests API)
# ============================================================================
@pytest.fixture
def asset_base_payload():
    return {
        "name": "Web Server 01",
        "type": "Server",
        "tags": ["web", "prod"],
        "configParam1": "192.168.1.10",
    }


@pytest.fixture
def asset_payload_factory(asset_base_payload):
    def _factory(**overrides):
        data = {**asset_base_payload}
        data.update(overrides)
        return data
    return _factory
