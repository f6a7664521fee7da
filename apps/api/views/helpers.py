"""
Shared helper functions, decorators, and utilities for views.
"""

import json
import logging
from functools import wraps

from django.conf import settings
from django.http import JsonResponse

from ..apps import get_api_config
from ..models import AttributeScope, EntityType

logger = logging.getLogger(__name__)

# The list endpoints echo a fixed paging envelope; there is no real paging.
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 50


class ValidationError(Exception):
    """Malformed or missing request input. Answered with HTTP 400."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

def success_response(data=None, message=None, status=200):
    payload = {"success": True}
    if data is not None:
        payload["data"] = data
    if message is not None:
        payload["message"] = message
    return JsonResponse(payload, status=status)


def error_response(message, status, **extra):
    return JsonResponse({"success": False, "message": message, **extra}, status=status)


def list_response(items):
    """Envelope for list endpoints, with the fixed single-page echo."""
    return JsonResponse(
        {
            "success": True,
            "data": items,
            "total": len(items),
            "page": DEFAULT_PAGE,
            "limit": DEFAULT_PAGE_SIZE,
            "totalPages": 1,
        }
    )


def method_not_allowed(request, allowed):
    response = error_response(f"Method {request.method} not allowed", 405)
    response["Allow"] = ", ".join(allowed)
    return response


def internal_error_response(exc):
    """
    Generic 500 answer. Exception text is only exposed when DEBUG is on.
    """
    return error_response(
        "Something went wrong!",
        500,
        error=str(exc) if settings.DEBUG else "Internal server error",
    )


def json_endpoint(action):
    """
    Decorator for JSON API views: the error boundary between stores and HTTP.

    ``ValidationError`` becomes a 400 response. Any other exception is logged
    and answered with a generic 500. ``action`` names the operation in logs.
    """
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            try:
                return view_func(request, *args, **kwargs)
            except ValidationError as e:
                return error_response(e.message, 400)
            except Exception as e:
                logger.exception("%s error", action)
                return internal_error_response(e)
        return _wrapped
    return decorator


# ---------------------------------------------------------------------------
# Request parsing
# ---------------------------------------------------------------------------

def parse_json_object(request) -> dict:
    """Decode the request body as a JSON object (empty body means ``{}``)."""
    try:
        payload = json.loads(request.body.decode("utf-8") or "{}")
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValidationError(f"Invalid JSON: {e}")
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def _parse_choice(value, choices, field):
    if value not in choices.values:
        allowed = ", ".join(choices.values)
        raise ValidationError(f"Invalid '{field}' {value!r}, expected one of: {allowed}")
    return value


def parse_entity_type(value) -> str:
    return _parse_choice(value, EntityType, "entityType")


def parse_scope(value) -> str:
    return _parse_choice(value, AttributeScope, "scope")


def parse_int_param(request, name, minimum=None):
    """
    Read an optional integer query parameter. Missing or empty means None.
    """
    raw = request.GET.get(name)
    if raw is None or raw == "":
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(f"Invalid '{name}', must be an integer")
    if minimum is not None and value < minimum:
        raise ValidationError(f"Invalid '{name}', must be >= {minimum}")
    return value


def parse_keys_param(request):
    """
    Read the comma-separated ``keys`` parameter. Missing or empty means None
    (no key filter). Empty segments are dropped, so a value made only of
    commas yields an empty list, which matches no key.
    """
    raw = request.GET.get("keys")
    if not raw:
        return None
    return [k for k in raw.split(",") if k]


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------

def attribute_store():
    return get_api_config().attributes


def telemetry_store():
    return get_api_config().telemetry


def entity_store(resource_name):
    return get_api_config().resources[resource_name]
