# server/tests/unit/test_seed_demo_data.py
import importlib.util
from pathlib import Path

import pytest

pytestmark = pytest.mark.unit

_SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "seed_demo_data.py"


@pytest.fixture(scope="module")
def seed_mod():
    spec = importlib.util.spec_from_file_location("seed_demo_data", _SCRIPT)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_seed_is_idempotent(seed_mod, memory_uow):
    first = seed_mod.seed(memory_uow)
    second = seed_mod.seed(memory_uow)

    assert first == {"folders": 4, "assets": 6}
    assert second == {"folders": 0, "assets": 0}

    folders = {f.name: f for f in memory_uow.folders.list()}
    assert folders["Core Databases"].parent_id == folders["Production Servers"].id

    assets = {a.name: a for a in memory_uow.assets.list()}
    assert assets["Legacy App Server"].folder_id is None
    assert assets["Production PostgreSQL DB"].configuration["static_configs"][0]["targets"] == ["postgres-primary:9187"]
    assert all(a.status == "pending" for a in assets.values())


def test_guard_refuses_without_flag(seed_mod, monkeypatch):
    monkeypatch.delenv("SEED_DEMO_DATA", raising=False)
    with pytest.raises(SystemExit):
        seed_mod.main(["seed_demo_data.py"])


def test_guard_refuses_prod(seed_mod, monkeypatch):
    monkeypatch.setenv("SEED_DEMO_DATA", "true")
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.delenv("ALLOW_PROD_SEED", raising=False)
    with pytest.raises(SystemExit):
        seed_mod.main(["seed_demo_data.py"])
