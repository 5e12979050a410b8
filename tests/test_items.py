import uuid
from datetime import datetime, timedelta


class LaterDatetime(datetime):
    """datetime whose utcnow runs a few seconds ahead of the real clock."""

    @classmethod
    def utcnow(cls):
        return datetime.utcnow() + timedelta(seconds=5)


def test_scenario_create_and_favorite(client, login):
    headers = login()
    vault = client.post("/api/vaults", json={"name": "Work"}, headers=headers).json()

    r = client.post(
        f"/api/vaults/{vault['id']}/items",
        json={"type": "login", "name": "site", "data": {"u": "a", "p": "b"}},
        headers=headers,
    )
    assert r.status_code == 201
    item = r.json()
    assert item["data"] == {"u": "a", "p": "b"}
    assert item["favorite"] is False
    assert item["vault_id"] == vault["id"]

    r = client.put(f"/api/items/{item['id']}", json={"favorite": True}, headers=headers)
    assert r.status_code == 200
    assert r.json()["favorite"] is True
    assert r.json()["name"] == "site"


def test_create_item_requires_fields(client, login, default_vault_id):
    headers = login()
    vault_id = default_vault_id(headers)
    for body in (
        {"name": "n", "data": {"a": 1}},
        {"type": "login", "data": {"a": 1}},
        {"type": "login", "name": "n"},
    ):
        r = client.post(f"/api/vaults/{vault_id}/items", json=body, headers=headers)
        assert r.status_code == 400
        assert r.json() == {"error": "Type, name and data are required"}


def test_create_item_rejects_scalar_data(client, login, default_vault_id):
    headers = login()
    vault_id = default_vault_id(headers)
    r = client.post(
        f"/api/vaults/{vault_id}/items",
        json={"type": "note", "name": "n", "data": "plain text"},
        headers=headers,
    )
    assert r.status_code == 400


def test_create_item_accepts_empty_object_and_array(client, login, make_item):
    headers = login()
    for payload in ({}, []):
        created = make_item(headers, type="note", name="empty", data=payload)
        assert created["data"] == payload
        fetched = client.get(f"/api/items/{created['id']}", headers=headers).json()
        assert fetched["data"] == payload


def test_update_replaces_data_with_empty_object_and_array(client, login, make_item):
    headers = login()
    created = make_item(headers, data={"u": "a"})

    for payload in ({}, []):
        r = client.put(f"/api/items/{created['id']}", json={"data": payload}, headers=headers)
        assert r.status_code == 200
        assert r.json()["data"] == payload
        assert client.get(f"/api/items/{created['id']}", headers=headers).json()["data"] == payload


def test_update_with_null_data_keeps_payload(client, login, make_item):
    headers = login()
    created = make_item(headers, data={"u": "a"})

    r = client.put(f"/api/items/{created['id']}", json={"data": None, "name": "renamed"}, headers=headers)
    assert r.status_code == 200
    assert r.json()["data"] == {"u": "a"}
    assert r.json()["name"] == "renamed"


def test_create_item_in_unknown_vault(client, login):
    headers = login()
    body = {"type": "login", "name": "n", "data": {"a": 1}}
    r = client.post(f"/api/vaults/{uuid.uuid4()}/items", json=body, headers=headers)
    assert r.status_code == 404
    assert r.json() == {"error": "Vault not found"}

    r = client.post("/api/vaults/not-a-uuid/items", json=body, headers=headers)
    assert r.status_code == 404


def test_get_item_deserializes_payload(client, login, make_item):
    headers = login()
    created = make_item(headers, data={"notes": ["x", "y"], "pin": 1234})

    r = client.get(f"/api/items/{created['id']}", headers=headers)
    assert r.status_code == 200
    assert r.json()["data"] == {"notes": ["x", "y"], "pin": 1234}


def test_list_vault_items(client, login, make_item, default_vault_id):
    headers = login()
    vault_id = default_vault_id(headers)
    make_item(headers, name="one")
    make_item(headers, name="two", data=[1, 2, 3])
    other = client.post("/api/vaults", json={"name": "Other"}, headers=headers).json()
    make_item(headers, name="elsewhere", vault_id=other["id"])

    r = client.get(f"/api/vaults/{vault_id}/items", headers=headers)
    assert r.status_code == 200
    items = r.json()
    assert [i["name"] for i in items] == ["one", "two"]
    assert items[1]["data"] == [1, 2, 3]


def test_list_items_of_unknown_vault(client, login):
    headers = login()
    r = client.get(f"/api/vaults/{uuid.uuid4()}/items", headers=headers)
    assert r.status_code == 404


def test_update_favorite_false_changes_only_favorite(client, login, make_item, monkeypatch):
    headers = login()
    created = make_item(headers, favorite=True)
    assert created["favorite"] is True
    before = client.get(f"/api/items/{created['id']}", headers=headers).json()

    monkeypatch.setattr("lockbox.services.items.datetime", LaterDatetime)
    r = client.put(f"/api/items/{created['id']}", json={"favorite": False}, headers=headers)
    assert r.status_code == 200
    after = r.json()

    assert after["favorite"] is False
    assert datetime.fromisoformat(after["updated_at"]) > datetime.fromisoformat(before["updated_at"])
    for field in ("id", "vault_id", "user_id", "type", "name", "data", "created_at"):
        assert after[field] == before[field]


def test_update_applies_only_present_fields(client, login, make_item):
    headers = login()
    created = make_item(headers, name="old", favorite=True)

    r = client.put(
        f"/api/items/{created['id']}",
        json={"name": "new", "data": {"u": "z"}},
        headers=headers,
    )
    assert r.status_code == 200
    body = r.json()
    assert body["name"] == "new"
    assert body["data"] == {"u": "z"}
    assert body["type"] == "login"
    assert body["favorite"] is True


def test_update_ignores_empty_values(client, login, make_item):
    headers = login()
    created = make_item(headers, name="keep")

    r = client.put(f"/api/items/{created['id']}", json={"name": "", "type": ""}, headers=headers)
    assert r.status_code == 200
    assert r.json()["name"] == "keep"
    assert r.json()["type"] == "login"


def test_update_unknown_item(client, login):
    headers = login()
    r = client.put(f"/api/items/{uuid.uuid4()}", json={"name": "x"}, headers=headers)
    assert r.status_code == 404
    assert r.json() == {"error": "Item not found"}


def test_delete_item(client, login, make_item):
    headers = login()
    created = make_item(headers)

    r = client.delete(f"/api/items/{created['id']}", headers=headers)
    assert r.status_code == 200
    assert r.json() == {"message": "Item deleted successfully"}
    assert client.get(f"/api/items/{created['id']}", headers=headers).status_code == 404
    assert client.delete(f"/api/items/{created['id']}", headers=headers).status_code == 404


def test_delete_item_in_folder(client, login, make_item):
    headers = login()
    created = make_item(headers)
    folder = client.post("/api/folders", json={"name": "F"}, headers=headers).json()
    client.post(f"/api/items/{created['id']}/folders/{folder['id']}", headers=headers)

    assert client.delete(f"/api/items/{created['id']}", headers=headers).status_code == 200
    assert client.get(f"/api/folders/{folder['id']}/items", headers=headers).json() == []


def test_other_users_items_are_not_found(client, login, make_item, default_vault_id):
    alice = login("alice@x.com", "pw")
    bob = login("bob@x.com", "pw")
    item = make_item(alice, name="secret")
    alice_vault = default_vault_id(alice)

    assert client.get(f"/api/items/{item['id']}", headers=bob).status_code == 404
    assert client.put(f"/api/items/{item['id']}", json={"name": "pwned"}, headers=bob).status_code == 404
    assert client.delete(f"/api/items/{item['id']}", headers=bob).status_code == 404
    assert client.get(f"/api/vaults/{alice_vault}/items", headers=bob).status_code == 404
    r = client.post(
        f"/api/vaults/{alice_vault}/items",
        json={"type": "login", "name": "n", "data": {"a": 1}},
        headers=bob,
    )
    assert r.status_code == 404

    still = client.get(f"/api/items/{item['id']}", headers=alice).json()
    assert still["name"] == "secret"
