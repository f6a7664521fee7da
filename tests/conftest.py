from __future__ import annotations

import json

import pytest
from django.apps import apps
from django.core.cache import cache


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def set(self, value: int) -> None:
        self.now = value


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def fresh_stores():
    # Stores are process-wide; give every test an empty set.
    apps.get_app_config("api").reset_stores()
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api(client):
    """Django test client with JSON helpers."""

    class JsonClient:
        def get(self, path, params=None):
            return client.get(path, params or {})

        def post(self, path, payload):
            return client.post(path, json.dumps(payload), content_type="application/json")

        def put(self, path, payload):
            return client.put(path, json.dumps(payload), content_type="application/json")

        def delete(self, path):
            return client.delete(path)

    return JsonClient()
