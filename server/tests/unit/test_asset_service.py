# server/tests/unit/test_asset_service.py
import datetime as dt

import pytest

from prometheus_lens.application.services.asset_service import UNSET, AssetService
from prometheus_lens.application.services.folder_service import FolderService
from prometheus_lens.domain.errors import NotFoundError, ValidationError

pytestmark = pytest.mark.unit


@pytest.fixture
def svc(memory_uow):
    return AssetService(memory_uow)


@pytest.fixture
def folder(memory_uow):
    return FolderService(memory_uow).create_folder("Prod")


def test_create_is_pending_with_fresh_timestamp(svc):
    before = dt.datetime.now(dt.timezone.utc)
    a = svc.create_asset("Web 01", "Server", config_param1="10.0.0.1")
    after = dt.datetime.now(dt.timezone.utc)

    assert a.id.startswith("asset-")
    assert a.status == "pending"
    assert before <= a.last_checked <= after
    assert a.configuration["static_configs"][0]["targets"] == ["10.0.0.1:9100"]


def test_create_without_params_has_empty_configuration(svc):
    assert svc.create_asset("Web", "Server").configuration == {}


def test_explicit_configuration_wins_over_params(svc):
    cfg = {"job_name": "custom", "static_configs": [{"targets": ["h:1"]}]}
    a = svc.create_asset("Web", "Server", configuration=cfg, config_param1="ignored")
    assert a.configuration == cfg


def test_tags_are_normalized(svc):
    a = svc.create_asset("Web", "Server", tags=" web, prod ,web,, ")
    assert a.tags == ["prod", "web"]


@pytest.mark.parametrize("name", [None, "", "  "])
def test_create_requires_name(svc, name):
    with pytest.raises(ValidationError) as ei:
        svc.create_asset(name, "Server")
    assert ei.value.field == "name"


@pytest.mark.parametrize("asset_type", [None, "", "Mainframe"])
def test_create_requires_known_type(svc, asset_type):
    with pytest.raises(ValidationError) as ei:
        svc.create_asset("Web", asset_type)
    assert ei.value.field == "type"


def test_create_with_unknown_folder_rejected(svc):
    with pytest.raises(ValidationError) as ei:
        svc.create_asset("Web", "Server", folder_id="folder-nope")
    assert ei.value.field == "folderId"


def test_list_sorted_by_name_then_id(svc):
    svc.create_asset("b", "Server")
    svc.create_asset("a", "Server")
    svc.create_asset("a", "Docker")
    names = [a.name for a in svc.list_assets()]
    assert names == ["a", "a", "b"]


def test_get_unknown_asset(svc):
    with pytest.raises(NotFoundError) as ei:
        svc.get_asset("asset-nope")
    assert ei.value.message == "Asset not found"


def test_partial_update_keeps_omitted_fields(svc, folder):
    a = svc.create_asset("Web", "Server", tags=["x"], folder_id=folder.id, grafana_link="https://g/d/1")
    updated = svc.update_asset(a.id, tags=["y"])
    assert updated.tags == ["y"]
    assert updated.folder_id == folder.id
    assert updated.grafana_link == "https://g/d/1"


@pytest.mark.parametrize("clear", [None, "", "  "])
def test_folder_is_cleared_by_null_or_empty(svc, folder, clear):
    a = svc.create_asset("Web", "Server", folder_id=folder.id)
    assert svc.update_asset(a.id, folder_id=clear).folder_id is None


def test_unset_folder_is_preserved(svc, folder):
    a = svc.create_asset("Web", "Server", folder_id=folder.id)
    assert svc.update_asset(a.id, folder_id=UNSET).folder_id == folder.id


def test_update_to_unknown_folder_rejected(svc):
    a = svc.create_asset("Web", "Server")
    with pytest.raises(ValidationError):
        svc.update_asset(a.id, folder_id="folder-nope")


def test_replace_configuration_keeps_identity(svc):
    a = svc.create_asset("Web", "Server", tags=["web"], config_param1="10.0.0.1")
    new_cfg = {"job_name": "other", "static_configs": [{"targets": ["h:9"]}]}

    b = svc.replace_configuration(a.id, new_cfg)

    assert (b.id, b.name, b.type, b.tags) == (a.id, a.name, a.type, a.tags)
    assert b.configuration == new_cfg
    assert b.last_checked >= a.last_checked


@pytest.mark.parametrize("payload", [None, [], "job", 3])
def test_replace_configuration_requires_object(svc, payload):
    a = svc.create_asset("Web", "Server")
    with pytest.raises(ValidationError) as ei:
        svc.replace_configuration(a.id, payload)
    assert ei.value.message == "Invalid configuration payload. Expected a JSON object."


def test_set_status_moves_timestamp(svc):
    a = svc.create_asset("Web", "Server")
    b = svc.set_status(a.id, "connected")
    assert b.status == "connected"
    assert b.last_checked >= a.last_checked
    with pytest.raises(ValidationError):
        svc.set_status(a.id, "flapping")


def test_delete_asset(svc, memory_uow):
    a = svc.create_asset("Web", "Server")
    svc.delete_asset(a.id)
    assert svc.list_assets() == []
    with pytest.raises(NotFoundError):
        svc.delete_asset(a.id)
    assert memory_uow.commits >= 2
