"""
Attribute views - query, scope-wide save, and single-key delete.
"""

import logging

from django.views.decorators.csrf import csrf_exempt

from ..ratelimits import ratelimit_writes
from .helpers import (
    attribute_store,
    error_response,
    json_endpoint,
    list_response,
    method_not_allowed,
    parse_entity_type,
    parse_json_object,
    parse_scope,
    success_response,
)

logger = logging.getLogger(__name__)


@json_endpoint("Get attributes")
def list_attributes(request):
    """
    GET /api/attributes?entityId=&entityType=&scope=

    Every supplied filter must match; omitted filters match everything.
    """
    if request.method != "GET":
        return method_not_allowed(request, ["GET"])

    records = attribute_store().query(
        entity_id=request.GET.get("entityId") or None,
        entity_type=request.GET.get("entityType") or None,
        scope=request.GET.get("scope") or None,
    )
    return list_response(records)


@csrf_exempt
@ratelimit_writes
@json_endpoint("Save attribute")
def save_attributes(request, entity_type, entity_id, scope):
    """
    POST /api/attributes/<entityType>/<entityId>/<scope>

    Body: {"<key>": <value>, ...}

    Replaces the whole scope: keys previously saved under this
    entity/scope and missing from the body are removed.
    """
    if request.method != "POST":
        return method_not_allowed(request, ["POST"])

    entity_type = parse_entity_type(entity_type)
    scope = parse_scope(scope)
    payload = parse_json_object(request)

    count = attribute_store().save(entity_type, entity_id, scope, payload)
    logger.info("Saved %d attributes for %s %s (%s)", count, entity_type, entity_id, scope)

    return success_response(message="Attributes saved successfully")


@csrf_exempt
@ratelimit_writes
@json_endpoint("Delete attribute")
def delete_attribute(request, entity_type, entity_id, scope, key):
    """
    DELETE /api/attributes/<entityType>/<entityId>/<scope>/<key>
    """
    if request.method != "DELETE":
        return method_not_allowed(request, ["DELETE"])

    entity_type = parse_entity_type(entity_type)
    scope = parse_scope(scope)

    if not attribute_store().remove(entity_type, entity_id, scope, key):
        return error_response("Attribute not found", 404)

    logger.info("Deleted attribute %s of %s %s (%s)", key, entity_type, entity_id, scope)
    return success_response(message="Attribute deleted successfully")
