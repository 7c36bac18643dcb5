# server/tests/unit/test_folders_api.py
import pytest

pytestmark = pytest.mark.unit

BASE = "/api/v1/folders"


def _folder(client, name, parent_id=None):
    r = client.post(BASE, json={"name": name, "parentId": parent_id})
    assert r.status_code == 201, r.text
    return r.json()


def test_crud_roundtrip(client):
    root = _folder(client, "Production")
    child = _folder(client, "Databases", root["id"])
    assert child["parentId"] == root["id"]

    r = client.get(BASE)
    assert [f["name"] for f in r.json()] == ["Databases", "Production"]

    r = client.put(f"{BASE}/{child['id']}", json={"name": "DBs", "parentId": None})
    assert r.status_code == 200
    assert r.json() == {"id": child["id"], "name": "DBs", "parentId": None}

    assert client.get(f"{BASE}/{child['id']}").json()["name"] == "DBs"


def test_create_requires_name(client):
    r = client.post(BASE, json={"name": "  "})
    assert r.status_code == 400
    assert r.json()["details"] == {"field": "name"}


def test_cycle_is_rejected(client):
    a = _folder(client, "A")
    b = _folder(client, "B", a["id"])
    r = client.put(f"{BASE}/{a['id']}", json={"name": "A", "parentId": b["id"]})
    assert r.status_code == 400
    assert r.json()["error"] == "Circular parent folder dependency detected"


def test_self_parent_is_rejected(client):
    a = _folder(client, "A")
    r = client.put(f"{BASE}/{a['id']}", json={"name": "A", "parentId": a["id"]})
    assert r.status_code == 400
    assert r.json()["error"] == "A folder cannot be its own parent"


def test_update_unknown_is_404(client):
    r = client.put(f"{BASE}/folder-nope", json={"name": "x"})
    assert r.status_code == 404
    assert r.json() == {"error": "Folder not found"}


def test_delete_reparents_children_to_root(client):
    a = _folder(client, "A")
    b = _folder(client, "B", a["id"])
    c = _folder(client, "C", b["id"])

    r = client.delete(f"{BASE}/{b['id']}")
    assert r.status_code == 200
    assert r.json() == {"success": True}

    remaining = {f["id"]: f["parentId"] for f in client.get(BASE).json()}
    assert remaining == {a["id"]: None, c["id"]: None}
    assert client.delete(f"{BASE}/{b['id']}").status_code == 404
