from __future__ import annotations

from apps.api.models import ASSET_PROFILE, DEVICE
from apps.api.stores import EntityStore


def test_create_picks_fields_and_adds_defaults() -> None:
    store = EntityStore(ASSET_PROFILE)

    record = store.create({"name": "Pump", "type": "hydraulic", "bogus": "ignored"})

    assert record["name"] == "Pump"
    assert record["type"] == "hydraulic"
    assert record["description"] is None
    assert "bogus" not in record
    assert record["defaultAttributes"] == {}
    assert record["rules"] == []
    assert record["createdAt"] == record["updatedAt"]
    assert store.get(record["id"]) == record


def test_device_defaults_include_credentials() -> None:
    store = EntityStore(DEVICE)

    first = store.create({"name": "Sensor A"})
    second = store.create({"name": "Sensor B"})

    assert first["isActive"] is True
    assert first["credentials"]["credentialsType"] == "ACCESS_TOKEN"
    assert first["credentials"]["credentialsId"].startswith("token_")
    assert first["credentials"]["credentialsId"] != second["credentials"]["credentialsId"]
    assert first["id"] != second["id"]


def test_find_search_and_filter() -> None:
    store = EntityStore(ASSET_PROFILE)
    store.create({"name": "Water Pump", "description": "Main", "type": "pump"})
    store.create({"name": "Boiler", "description": "Basement PUMP room", "type": "heater"})
    store.create({"name": "Fan", "type": "hvac"})

    assert [r["name"] for r in store.find(search="pump")] == ["Water Pump", "Boiler"]
    assert [r["name"] for r in store.find(type="hvac")] == ["Fan"]
    assert [r["name"] for r in store.find(search="pump", type="heater")] == ["Boiler"]
    assert len(store.find()) == 3


def test_update_merges_and_keeps_id() -> None:
    store = EntityStore(DEVICE)
    record = store.create({"name": "Sensor", "label": "L1"})

    updated = store.update(record["id"], {"id": "hijack", "label": "L2", "extra": {"x": 1}})

    assert updated["id"] == record["id"]
    assert updated["name"] == "Sensor"
    assert updated["label"] == "L2"
    assert updated["extra"] == {"x": 1}
    assert store.get("hijack") is None


def test_update_and_delete_missing() -> None:
    store = EntityStore(DEVICE)

    assert store.update("nope", {"name": "x"}) is None
    assert store.delete("nope") is False


def test_delete() -> None:
    store = EntityStore(DEVICE)
    record = store.create({"name": "Sensor"})

    assert store.delete(record["id"]) is True
    assert store.get(record["id"]) is None
    assert len(store) == 0


def test_returned_records_are_copies() -> None:
    store = EntityStore(DEVICE)
    record = store.create({"name": "Sensor"})

    record["attributes"]["injected"] = True
    store.find()[0]["name"] = "changed"

    stored = store.get(record["id"])
    assert stored["attributes"] == {}
    assert stored["name"] == "Sensor"


def test_search_skips_non_string_fields() -> None:
    store = EntityStore(ASSET_PROFILE)
    store.create({"name": "Pump", "description": 5})
    store.update(store.create({"name": "Valve"})["id"], {"name": ["not", "text"]})

    assert store.find(search="x") == []
    assert [r["name"] for r in store.find(search="pump")] == ["Pump"]
