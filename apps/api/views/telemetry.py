"""
Telemetry views - ingestion, time-series queries, and range deletion.
"""

import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt

from ..ratelimits import ratelimit_telemetry, ratelimit_writes
from .helpers import (
    json_endpoint,
    method_not_allowed,
    parse_entity_type,
    parse_int_param,
    parse_json_object,
    parse_keys_param,
    success_response,
    telemetry_store,
)

logger = logging.getLogger(__name__)


@json_endpoint("Get telemetry")
def telemetry_timeseries(request, entity_type, entity_id):
    """
    Time-series query endpoint for charts and history views.

    GET /api/telemetry/<entityType>/<entityId>/values/timeseries

    Query params:
      - keys: optional comma-separated key names
      - startTs / endTs: optional inclusive bounds, epoch millis
      - limit: optional, keep only the newest N samples per key
      - interval: accepted for client compatibility, ignored

    Response is the bare grouped map, not the success envelope:
    {
        "temperature": [{"ts": 1700000000000, "value": "21.5"}, ...],
        ...
    }
    """
    if request.method != "GET":
        return method_not_allowed(request, ["GET"])

    entity_type = parse_entity_type(entity_type)
    data = telemetry_store().query(
        entity_type,
        entity_id,
        keys=parse_keys_param(request),
        start_ts=parse_int_param(request, "startTs"),
        end_ts=parse_int_param(request, "endTs"),
        limit=parse_int_param(request, "limit", minimum=1),
    )
    return JsonResponse(data)


@csrf_exempt
@ratelimit_telemetry
@json_endpoint("Save telemetry")
def ingest_telemetry(request, entity_type, entity_id):
    """
    Ingest one batch of telemetry for an asset or device.

    POST /api/telemetry/<entityType>/<entityId>

    Body (JSON) example:
    {
        "temperature": 21.5,
        "humidity": 40,
        "door_open": false
    }

    Every key is stored as one sample; all samples of the batch share the
    server timestamp and values are stored as strings.
    """
    if request.method != "POST":
        return method_not_allowed(request, ["POST"])

    entity_type = parse_entity_type(entity_type)
    payload = parse_json_object(request)

    ts = telemetry_store().save(entity_type, entity_id, payload)

    logger.info(
        "Ingested %d telemetry keys for %s %s (ts=%s)",
        len(payload),
        entity_type,
        entity_id,
        ts,
    )

    return success_response(message="Telemetry data saved successfully")


@csrf_exempt
@ratelimit_writes
@json_endpoint("Delete telemetry")
def delete_telemetry(request, entity_type, entity_id):
    """
    DELETE /api/telemetry/<entityType>/<entityId>/timeseries/delete

    Query params ``keys``, ``startTs`` and ``endTs`` narrow the deletion;
    a sample is removed only when it satisfies all of the supplied ones.
    """
    if request.method != "DELETE":
        return method_not_allowed(request, ["DELETE"])

    entity_type = parse_entity_type(entity_type)
    removed = telemetry_store().delete_range(
        entity_type,
        entity_id,
        keys=parse_keys_param(request),
        start_ts=parse_int_param(request, "startTs"),
        end_ts=parse_int_param(request, "endTs"),
    )

    logger.info("Deleted %d telemetry records for %s %s", removed, entity_type, entity_id)
    return success_response(message=f"Deleted {removed} telemetry records")
