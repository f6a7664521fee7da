"""
IoT Asset Console - In-Memory Stores

Process-local stores behind the REST API:
    - AttributeStore: scoped key/value attributes per entity
    - TelemetryStore: append-only time-series samples per entity
    - EntityStore: generic id-keyed collection for the CRUD resources

Every public operation runs under the store's lock so it is indivisible
relative to other operations on the same collection. Stores never return
references into their collections; callers always get fresh dicts.

Stores are built once by ``ApiConfig.ready()``; see ``apps.api.apps``.

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file
"""

import copy
import json
import threading
import time

from .models import AttributeRecord, TelemetrySample, iso_now, new_id


def now_ms() -> int:
    """Wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def stringify_value(value) -> str:
    """
    Coerce a telemetry value to its stored string form.

    Mirrors how the browser client renders values: booleans are lowercase,
    integral floats below 1e21 drop their fraction, structured values become compact JSON.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return json.dumps(value, separators=(",", ":"))


# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------

class AttributeStore:
    """Scoped key/value attributes for assets and devices."""

    def __init__(self, clock=now_ms):
        self._clock = clock
        self._lock = threading.RLock()
        self._records: list[AttributeRecord] = []

    def __len__(self):
        with self._lock:
            return len(self._records)

    def query(self, entity_id=None, entity_type=None, scope=None) -> list[dict]:
        """Return every record matching all supplied filters, oldest first."""
        with self._lock:
            return [
                r.to_dict()
                for r in self._records
                if (entity_id is None or r.entity_id == entity_id)
                and (entity_type is None or r.entity_type == entity_type)
                and (scope is None or r.scope == scope)
            ]

    def save(self, entity_type: str, entity_id: str, scope: str, attributes: dict) -> int:
        """
        Replace every attribute of (entity_type, entity_id, scope) with ``attributes``.

        Keys stored earlier under the same scope but missing from ``attributes``
        are dropped. Returns the number of records written.
        """
        with self._lock:
            ts = self._clock()
            fresh = [
                AttributeRecord(
                    entity_id=entity_id,
                    entity_type=entity_type,
                    scope=scope,
                    key=key,
                    value=copy.deepcopy(value),
                    last_update_ts=ts,
                )
                for key, value in attributes.items()
            ]
            self._records = [
                r for r in self._records
                if not (
                    r.entity_id == entity_id
                    and r.entity_type == entity_type
                    and r.scope == scope
                )
            ]
            self._records.extend(fresh)
            return len(fresh)

    def remove(self, entity_type: str, entity_id: str, scope: str, key: str) -> bool:
        """Delete one attribute. Returns False when nothing matched."""
        with self._lock:
            for index, r in enumerate(self._records):
                if (
                    r.entity_id == entity_id
                    and r.entity_type == entity_type
                    and r.scope == scope
                    and r.key == key
                ):
                    del self._records[index]
                    return True
            return False


# ---------------------------------------------------------------------------
# Telemetry
# ---------------------------------------------------------------------------

class TelemetryStore:
    """Append-only time-series samples keyed by entity and telemetry key."""

    def __init__(self, clock=now_ms):
        self._clock = clock
        self._lock = threading.RLock()
        self._samples: list[TelemetrySample] = []

    def __len__(self):
        with self._lock:
            return len(self._samples)

    def save(self, entity_type: str, entity_id: str, values: dict) -> int:
        """
        Append one sample per entry of ``values``, all sharing one timestamp.

        Returns the timestamp assigned to the batch.
        """
        with self._lock:
            ts = self._clock()
            self._samples.extend(
                TelemetrySample(
                    entity_id=entity_id,
                    entity_type=entity_type,
                    key=key,
                    ts=ts,
                    value=stringify_value(value),
                )
                for key, value in values.items()
            )
            return ts

    def query(
        self,
        entity_type: str,
        entity_id: str,
        keys=None,
        start_ts: int | None = None,
        end_ts: int | None = None,
        limit: int | None = None,
    ) -> dict[str, list[dict]]:
        """
        Return the entity's samples grouped by key.

        Each key's samples are sorted ascending by ``ts`` (ties keep insertion
        order). ``start_ts`` and ``end_ts`` are inclusive bounds. With ``limit``
        only the most recent ``limit`` samples of each key are kept. Keys with
        no matching samples are absent from the result.
        """
        wanted = set(keys) if keys is not None else None
        grouped: dict[str, list[TelemetrySample]] = {}
        with self._lock:
            for sample in self._samples:
                if not self._matches(sample, entity_type, entity_id, wanted, start_ts, end_ts):
                    continue
                grouped.setdefault(sample.key, []).append(sample)

        result = {}
        for key, samples in grouped.items():
            samples.sort(key=lambda s: s.ts)
            if limit is not None:
                samples = samples[-limit:]
            result[key] = [s.point() for s in samples]
        return result

    def delete_range(
        self,
        entity_type: str,
        entity_id: str,
        keys=None,
        start_ts: int | None = None,
        end_ts: int | None = None,
    ) -> int:
        """
        Remove the entity's samples that satisfy every supplied filter.

        Returns the number of samples removed.
        """
        wanted = set(keys) if keys is not None else None
        with self._lock:
            before = len(self._samples)
            self._samples = [
                s for s in self._samples
                if not self._matches(s, entity_type, entity_id, wanted, start_ts, end_ts)
            ]
            return before - len(self._samples)

    @staticmethod
    def _matches(sample, entity_type, entity_id, keys, start_ts, end_ts) -> bool:
        if not sample.matches_entity(entity_type, entity_id):
            return False
        if keys is not None and sample.key not in keys:
            return False
        if start_ts is not None and sample.ts < start_ts:
            return False
        if end_ts is not None and sample.ts > end_ts:
            return False
        return True


# ---------------------------------------------------------------------------
# CRUD resources
# ---------------------------------------------------------------------------

def _searchable(value) -> str:
    """Lowercased text for search matching; non-string values never match."""
    return value.lower() if isinstance(value, str) else ""


class EntityStore:
    """
    Id-keyed records for one CRUD resource (see ``ResourceDefinition``).

    Records are plain dicts using the wire field names.
    """

    def __init__(self, definition):
        self.definition = definition
        self._lock = threading.RLock()
        self._records: dict[str, dict] = {}

    def __len__(self):
        with self._lock:
            return len(self._records)

    def find(self, search=None, **filters) -> list[dict]:
        """
        Records whose name or description contains ``search`` (case-insensitive)
        and whose fields equal every value in ``filters``.
        """
        needle = search.lower() if search else None
        with self._lock:
            results = []
            for record in self._records.values():
                if needle and not (
                    needle in _searchable(record.get("name"))
                    or needle in _searchable(record.get("description"))
                ):
                    continue
                if any(record.get(f) != v for f, v in filters.items()):
                    continue
                results.append(copy.deepcopy(record))
            return results

    def get(self, record_id: str):
        with self._lock:
            record = self._records.get(record_id)
            return copy.deepcopy(record) if record is not None else None

    def create(self, payload: dict) -> dict:
        stamp = iso_now()
        record = {"id": new_id()}
        record.update({f: copy.deepcopy(payload.get(f)) for f in self.definition.fields})
        record.update(self.definition.defaults())
        record["createdAt"] = stamp
        record["updatedAt"] = stamp
        with self._lock:
            self._records[record["id"]] = record
            return copy.deepcopy(record)

    def update(self, record_id: str, payload: dict):
        """Shallow-merge ``payload`` into the record. Returns None when absent."""
        with self._lock:
            record = self._records.get(record_id)
            if record is None:
                return None
            changes = {k: copy.deepcopy(v) for k, v in payload.items() if k != "id"}
            record.update(changes)
            record["updatedAt"] = iso_now()
            return copy.deepcopy(record)

    def delete(self, record_id: str) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None
