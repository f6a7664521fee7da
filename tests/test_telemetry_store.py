from __future__ import annotations

import pytest

from apps.api.stores import TelemetryStore, stringify_value


def _store_with_series(clock, key: str, timestamps: list[int], entity: str = "d1") -> TelemetryStore:
    store = TelemetryStore(clock=clock)
    for i, ts in enumerate(timestamps):
        clock.set(ts)
        store.save("DEVICE", entity, {key: i})
    return store


def test_save_shares_one_timestamp_per_call(clock) -> None:
    clock.set(42_000)
    store = TelemetryStore(clock=clock)

    assert store.save("DEVICE", "d1", {"temperature": 21.5, "humidity": 40}) == 42_000

    assert store.query("DEVICE", "d1") == {
        "temperature": [{"ts": 42_000, "value": "21.5"}],
        "humidity": [{"ts": 42_000, "value": "40"}],
    }


def test_save_is_additive(clock) -> None:
    store = TelemetryStore(clock=clock)
    store.save("DEVICE", "d1", {"t": 1})
    store.save("DEVICE", "d1", {"t": 1})

    assert len(store.query("DEVICE", "d1")["t"]) == 2
    assert len(store) == 2


def test_round_trip_stringifies(clock) -> None:
    store = TelemetryStore(clock=clock)
    store.save("ASSET", "a1", {"x": 42})

    assert store.query("ASSET", "a1", keys=["x"]) == {"x": [{"ts": clock.now, "value": "42"}]}


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("on", "on"),
        (True, "true"),
        (False, "false"),
        (7, "7"),
        (42.0, "42"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (-2e22, "-2e+22"),
        (21.5, "21.5"),
        (None, "null"),
        ([1, 2], "[1,2]"),
        ({"a": 1}, '{"a":1}'),
    ],
)
def test_stringify_value(value, expected) -> None:
    assert stringify_value(value) == expected


def test_query_without_filters_sorts_every_key(clock) -> None:
    store = TelemetryStore(clock=clock)
    for ts in (300, 100, 200):
        clock.set(ts)
        store.save("DEVICE", "d1", {"a": ts, "b": -ts})

    result = store.query("DEVICE", "d1")

    assert set(result) == {"a", "b"}
    assert [p["ts"] for p in result["a"]] == [100, 200, 300]
    assert [p["value"] for p in result["b"]] == ["-100", "-200", "-300"]


def test_query_equal_timestamps_keep_insertion_order(clock) -> None:
    store = TelemetryStore(clock=clock)
    clock.set(500)
    store.save("DEVICE", "d1", {"k": "first"})
    store.save("DEVICE", "d1", {"k": "second"})
    clock.set(100)
    store.save("DEVICE", "d1", {"k": "early"})

    values = [p["value"] for p in store.query("DEVICE", "d1")["k"]]
    assert values == ["early", "first", "second"]


def test_query_limit_keeps_most_recent(clock) -> None:
    store = _store_with_series(clock, "t", [50, 10, 40, 20, 30])

    result = store.query("DEVICE", "d1", limit=2)

    assert result == {"t": [{"ts": 40, "value": "2"}, {"ts": 50, "value": "0"}]}


def test_query_limit_is_per_key(clock) -> None:
    store = TelemetryStore(clock=clock)
    for ts in (1, 2, 3):
        clock.set(ts)
        store.save("DEVICE", "d1", {"a": ts})
    clock.set(4)
    store.save("DEVICE", "d1", {"b": 4})

    result = store.query("DEVICE", "d1", limit=2)

    assert [p["ts"] for p in result["a"]] == [2, 3]
    assert [p["ts"] for p in result["b"]] == [4]


def test_query_time_window_is_inclusive(clock) -> None:
    store = _store_with_series(clock, "t", [99, 100, 150, 200, 201])

    result = store.query("DEVICE", "d1", start_ts=100, end_ts=200)

    assert [p["ts"] for p in result["t"]] == [100, 150, 200]
    assert [p["ts"] for p in store.query("DEVICE", "d1", start_ts=200)["t"]] == [200, 201]
    assert [p["ts"] for p in store.query("DEVICE", "d1", end_ts=100)["t"]] == [99, 100]


def test_query_filters_keys_and_entity(clock) -> None:
    store = TelemetryStore(clock=clock)
    store.save("DEVICE", "d1", {"a": 1, "b": 2, "c": 3})
    store.save("DEVICE", "d2", {"a": 9})
    store.save("ASSET", "d1", {"a": 8})

    result = store.query("DEVICE", "d1", keys=["a", "c", "missing"])

    assert result == {
        "a": [{"ts": clock.now, "value": "1"}],
        "c": [{"ts": clock.now, "value": "3"}],
    }


def test_query_omits_keys_without_samples(clock) -> None:
    store = _store_with_series(clock, "t", [10, 20])

    assert store.query("DEVICE", "d1", start_ts=1_000) == {}
    assert store.query("DEVICE", "unknown") == {}


def test_delete_range_intersects_filters(clock) -> None:
    store = TelemetryStore(clock=clock)
    for ts in (50, 100, 150, 200, 250):
        clock.set(ts)
        store.save("DEVICE", "d1", {"temperature": ts, "humidity": ts})
        store.save("DEVICE", "d2", {"temperature": ts})

    removed = store.delete_range("DEVICE", "d1", keys=["temperature"], start_ts=100, end_ts=200)

    assert removed == 3
    d1 = store.query("DEVICE", "d1")
    assert [p["ts"] for p in d1["temperature"]] == [50, 250]
    assert len(d1["humidity"]) == 5
    assert len(store.query("DEVICE", "d2")["temperature"]) == 5


def test_delete_range_without_filters_clears_entity(clock) -> None:
    store = TelemetryStore(clock=clock)
    store.save("DEVICE", "d1", {"a": 1, "b": 2})
    store.save("ASSET", "a1", {"a": 1})

    assert store.delete_range("DEVICE", "d1") == 2
    assert store.query("DEVICE", "d1") == {}
    assert store.query("ASSET", "a1") != {}


def test_delete_range_twice_is_idempotent(clock) -> None:
    store = _store_with_series(clock, "temperature", [100, 150, 300])

    first = store.delete_range("DEVICE", "d1", keys=["temperature"], start_ts=100, end_ts=200)
    second = store.delete_range("DEVICE", "d1", keys=["temperature"], start_ts=100, end_ts=200)

    assert first == 2
    assert second == 0


def test_empty_key_list_matches_nothing(clock) -> None:
    store = TelemetryStore(clock=clock)
    store.save("DEVICE", "d1", {"a": 1, "b": 2})

    assert store.query("DEVICE", "d1", keys=[]) == {}
    assert store.delete_range("DEVICE", "d1", keys=[]) == 0
    assert len(store) == 2
