"""
IoT Asset Console - Root Views

This module provides root-level views for the Django project: the health
check and the JSON error handlers used for unmatched routes and crashes.

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file
"""

import logging

from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health(request):
    """
    Health check endpoint for load balancers and monitoring.

    Returns:
        JsonResponse: Status OK with message.
    """
    return JsonResponse(

        {
            "status" : "OK",
            "message": "Server is running"
        }
    )


def route_not_found(request, exception=None):
    """handler404: JSON body instead of Django's HTML page."""
    return JsonResponse(
        {
            "success": False,
            "message": "Route not found",
        },
        status=404,
    )


def server_error(request):
    """handler500: last resort for errors raised outside the API views."""
    logger.error("Unhandled error on %s %s", request.method, request.path)
    return JsonResponse(
        {
            "success": False,
            "message": "Something went wrong!",
            "error": "Internal server error",
        },
        status=500,
    )
