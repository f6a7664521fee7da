"""
Views package for the API app.

This module re-exports all views so urls.py can import them from one place.
Views are organized into submodules:
  - helpers: Shared response envelopes, request parsing, and the error boundary
  - entities: CRUD endpoints for asset profiles, device profiles, assets, devices
  - attributes: Scoped attribute query, save, and delete
  - telemetry: Telemetry ingestion, time-series queries, and range deletion
"""

# Re-export from helpers
from .helpers import (
    ValidationError,
    json_endpoint,
    list_response,
    success_response,
)

# Re-export from entities
from .entities import (
    asset_detail,
    asset_profile_detail,
    asset_profiles_collection,
    assets_collection,
    device_detail,
    device_profile_detail,
    device_profiles_collection,
    devices_collection,
)

# Re-export from attributes
from .attributes import (
    delete_attribute,
    list_attributes,
    save_attributes,
)

# Re-export from telemetry
from .telemetry import (
    delete_telemetry,
    ingest_telemetry,
    telemetry_timeseries,
)

# Re-export ratelimited_error from ratelimits (used as RATELIMIT_VIEW)
from ..ratelimits import ratelimited_error

__all__ = [
    # Helpers
    "ValidationError",
    "json_endpoint",
    "list_response",
    "success_response",
    # Entities
    "asset_detail",
    "asset_profile_detail",
    "asset_profiles_collection",
    "assets_collection",
    "device_detail",
    "device_profile_detail",
    "device_profiles_collection",
    "devices_collection",
    # Attributes
    "delete_attribute",
    "list_attributes",
    "save_attributes",
    # Telemetry
    "delete_telemetry",
    "ingest_telemetry",
    "telemetry_timeseries",
    # Ratelimits
    "ratelimited_error",
]
