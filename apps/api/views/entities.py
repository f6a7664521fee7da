"""
CRUD views for asset profiles, device profiles, assets, and devices.

All four resources share the same endpoints, built by ``resource_views``:

    GET    /api/<resource>/          list (search + type filter)
    POST   /api/<resource>/          create
    GET    /api/<resource>/<id>/     retrieve
    PUT    /api/<resource>/<id>/     update (shallow merge)
    DELETE /api/<resource>/<id>/     delete
"""

import logging

from django.views.decorators.csrf import csrf_exempt

from ..models import ASSET, ASSET_PROFILE, DEVICE, DEVICE_PROFILE, TransportType
from ..ratelimits import ratelimit_writes
from .helpers import (
    ValidationError,
    entity_store,
    error_response,
    json_endpoint,
    list_response,
    method_not_allowed,
    parse_json_object,
    success_response,
)

logger = logging.getLogger(__name__)


def _validate_create(definition, payload):
    name = payload.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Field 'name' is required")
    _validate_fields(definition, payload)


def _validate_fields(definition, payload):
    for field in ("name", "description"):
        value = payload.get(field)
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"Field '{field}' must be a string")

    transport = payload.get("transportType")
    if definition is DEVICE_PROFILE and transport is not None:
        if transport not in TransportType.values:
            allowed = ", ".join(TransportType.values)
            raise ValidationError(
                f"Invalid 'transportType' {transport!r}, expected one of: {allowed}"
            )


def resource_views(definition):
    """
    Build the (collection, detail) view pair for one resource definition.
    """
    label = definition.label
    plural = definition.name.replace("_", " ")

    @csrf_exempt
    @ratelimit_writes(group=f"{definition.name}.collection")
    @json_endpoint(f"{label} collection")
    def collection(request):
        store = entity_store(definition.name)

        if request.method == "GET":
            filters = {}
            value = request.GET.get(definition.filter_param)
            if value:
                filters[definition.filter_field] = value
            records = store.find(search=request.GET.get("search") or None, **filters)
            return list_response(records)

        if request.method == "POST":
            payload = parse_json_object(request)
            _validate_create(definition, payload)
            record = store.create(payload)
            logger.info("Created %s %s (%s)", label.lower(), record["id"], record["name"])
            return success_response(
                data=record,
                message=f"{label} created successfully",
                status=201,
            )

        return method_not_allowed(request, ["GET", "POST"])

    @csrf_exempt
    @ratelimit_writes(group=f"{definition.name}.detail")
    @json_endpoint(f"{label} detail")
    def detail(request, record_id):
        store = entity_store(definition.name)

        if request.method == "GET":
            record = store.get(record_id)
            if record is None:
                return error_response(f"{label} not found", 404)
            return success_response(data=record)

        if request.method == "PUT":
            payload = parse_json_object(request)
            _validate_fields(definition, payload)
            record = store.update(record_id, payload)
            if record is None:
                return error_response(f"{label} not found", 404)
            logger.info("Updated %s %s", label.lower(), record_id)
            return success_response(data=record, message=f"{label} updated successfully")

        if request.method == "DELETE":
            if not store.delete(record_id):
                return error_response(f"{label} not found", 404)
            logger.info("Deleted %s %s", label.lower(), record_id)
            return success_response(message=f"{label} deleted successfully")

        return method_not_allowed(request, ["GET", "PUT", "DELETE"])

    collection.__name__ = f"{definition.name}_collection"
    collection.__qualname__ = collection.__name__
    collection.__doc__ = f"List or create {plural}."
    detail.__name__ = f"{definition.name}_detail"
    detail.__qualname__ = detail.__name__
    detail.__doc__ = f"Retrieve, update or delete one of the {plural}."
    return collection, detail


asset_profiles_collection, asset_profile_detail = resource_views(ASSET_PROFILE)
device_profiles_collection, device_profile_detail = resource_views(DEVICE_PROFILE)
assets_collection, asset_detail = resource_views(ASSET)
devices_collection, device_detail = resource_views(DEVICE)
