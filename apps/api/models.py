"""
IoT Asset Console - Data Models

This module defines the data shapes held by the in-memory stores:
    - EntityType: Owner kinds for attributes and telemetry (ASSET, DEVICE)
    - AttributeScope: Attribute scopes (client, server, shared)
    - AttributeRecord: One scoped key/value attribute of an entity
    - TelemetrySample: One time-series value of an entity
    - ResourceDefinition: Describes a CRUD resource (asset profiles, devices, ...)

There is no database behind these models. Records are plain dataclasses and
the stores in ``apps.api.stores`` own every instance.

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file
"""

import copy
import secrets
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone as dt_timezone
from typing import Any, Callable

from django.db import models


# ============================================================================
# ENUMERATIONS
# ============================================================================

class EntityType(models.TextChoices):
    ASSET = "ASSET", "Asset"
    DEVICE = "DEVICE", "Device"


class AttributeScope(models.TextChoices):
    CLIENT_SCOPE = "CLIENT_SCOPE", "Client attributes"
    SERVER_SCOPE = "SERVER_SCOPE", "Server attributes"
    SHARED_SCOPE = "SHARED_SCOPE", "Shared attributes"


class TransportType(models.TextChoices):
    HTTP = "HTTP", "HTTP"
    MQTT = "MQTT", "MQTT"
    COAP = "CoAP", "CoAP"
    LWM2M = "LWM2M", "LwM2M"


class CredentialsType(models.TextChoices):
    ACCESS_TOKEN = "ACCESS_TOKEN", "Access token"
    MQTT_BASIC = "MQTT_BASIC", "MQTT basic"
    X509_CERTIFICATE = "X509_CERTIFICATE", "X.509 certificate"


def new_id() -> str:
    return uuid.uuid4().hex


def iso_now() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    return datetime.now(dt_timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ============================================================================
# ATTRIBUTES & TELEMETRY
# ============================================================================

@dataclass
class AttributeRecord:
    entity_id: str
    entity_type: str
    scope: str
    key: str
    value: Any
    last_update_ts: int
    id: str = field(default_factory=new_id)

    def to_dict(self):
        return {
            "id": self.id,
            "entityId": self.entity_id,
            "entityType": self.entity_type,
            "scope": self.scope,
            "key": self.key,
            "value": copy.deepcopy(self.value),
            "lastUpdateTs": self.last_update_ts,
        }


@dataclass
class TelemetrySample:
    entity_id: str
    entity_type: str
    key: str
    ts: int
    value: str

    def matches_entity(self, entity_type: str, entity_id: str) -> bool:
        return self.entity_id == entity_id and self.entity_type == entity_type

    def point(self):
        """The ``{ts, value}`` pair returned by time-series queries."""
        return {"ts": self.ts, "value": self.value}


# ============================================================================
# CRUD RESOURCES
# ============================================================================

@dataclass(frozen=True)
class ResourceDefinition:
    """
    Describes one CRUD resource served by an ``EntityStore``.

    ``fields`` are the keys copied from a create payload. ``defaults`` builds
    the server-side fields of a new record. ``filter_param`` names the list
    query parameter and ``filter_field`` the record field it is matched on.
    """
    name: str
    label: str
    fields: tuple
    defaults: Callable[[], dict] = dict
    filter_param: str = "type"
    filter_field: str = "type"


def _device_defaults():
    return {
        "attributes": {},
        "credentials": {
            "credentialsType": CredentialsType.ACCESS_TOKEN.value,
            "credentialsId": f"token_{secrets.token_urlsafe(16)}",
        },
        "additionalInfo": {},
        "isActive": True,
        "lastActivityTime": iso_now(),
    }


ASSET_PROFILE = ResourceDefinition(
    name="asset_profiles",
    label="Asset profile",
    fields=("name", "description", "type", "manufacturer", "model", "specifications"),
    defaults=lambda: {"defaultAttributes": {}, "rules": []},
    filter_param="category",
    filter_field="type",
)

DEVICE_PROFILE = ResourceDefinition(
    name="device_profiles",
    label="Device profile",
    fields=(
        "name",
        "description",
        "deviceType",
        "manufacturer",
        "model",
        "firmwareVersion",
        "transportType",
        "specifications",
    ),
    defaults=lambda: {"defaultAttributes": {}, "alarmRules": []},
    filter_param="deviceType",
    filter_field="deviceType",
)

ASSET = ResourceDefinition(
    name="assets",
    label="Asset",
    fields=("name", "description", "label", "assetProfileId", "parentAssetId", "type"),
    defaults=lambda: {"attributes": {}, "additionalInfo": {}},
)

DEVICE = ResourceDefinition(
    name="devices",
    label="Device",
    fields=("name", "description", "label", "deviceProfileId", "assetId", "type"),
    defaults=_device_defaults,
)

RESOURCES = (ASSET_PROFILE, DEVICE_PROFILE, ASSET, DEVICE)
