"""
IoT Asset Console - Rate Limiting Decorators

This module provides rate limiting decorators to protect write endpoints
from runaway clients:
    - ratelimit_writes: 120 write requests per minute per client IP
    - ratelimit_telemetry: 60 telemetry uploads per minute per entity

Counters live in the default cache. Exceeding a limit raises
``Ratelimited``, which ``RatelimitMiddleware`` hands to ``ratelimited_error``.

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file
"""

from functools import wraps
from django.conf import settings
from django.http import JsonResponse
from django_ratelimit.decorators import ratelimit

WRITE_METHODS = ["POST", "PUT", "DELETE"]


def get_client_ip(request):
    """Extract client IP from request, handling proxies."""
    x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
    if x_forwarded_for:
        return x_forwarded_for.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR")


def get_entity_key(request):
    """Rate limit key for telemetry uploads: the target entity, from the URL."""
    kwargs = request.resolver_match.kwargs if request.resolver_match else {}
    entity_type = kwargs.get("entity_type")
    entity_id = kwargs.get("entity_id")
    if entity_type and entity_id:
        return f"{entity_type}:{entity_id}"
    return get_client_ip(request)


def ratelimit_writes(view_func=None, group=None):
    """
    Rate limit: 120 write requests per minute per client IP.

    Views built by a factory share one qualified name, so they pass an
    explicit ``group``: @ratelimit_writes(group="assets.collection").
    """
    if view_func is None:
        return lambda func: ratelimit_writes(func, group=group)

    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        decorated = ratelimit(
            group=group,
            key=lambda group, req: get_client_ip(req),
            rate=getattr(settings, "RATELIMIT_WRITES", "120/m"),
            method=WRITE_METHODS,
            block=True,
        )(view_func)
        return decorated(request, *args, **kwargs)
    return wrapper


def ratelimit_telemetry(view_func):
    """Rate limit: 60 telemetry uploads per minute per entity."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        decorated = ratelimit(
            key=lambda group, req: get_entity_key(req),
            rate=getattr(settings, "RATELIMIT_TELEMETRY", "60/m"),
            method=["POST"],
            block=True,
        )(view_func)
        return decorated(request, *args, **kwargs)
    return wrapper


def ratelimited_error(request, exception=None):
    """Custom view for rate limit exceeded errors."""
    return JsonResponse(
        {
            "success": False,
            "message": "Too many requests. Please try again later.",
        },
        status=429,
    )
