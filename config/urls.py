"""
IoT Asset Console - Root URL Configuration

This module defines the root URL routing for the Django project:
    - /api/health - Health check endpoint
    - /api/ - REST API endpoints (resources, attributes, telemetry)

Unmatched routes and unhandled errors answer with the JSON envelope
(see config.views).

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file

For URL routing reference:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.urls import path, re_path, include
from .views import health


urlpatterns = [
    re_path(r"^api/health/?$", health, name="health"),
    path("api/", include("apps.api.urls")),
]

handler404 = "config.views.route_not_found"
handler500 = "config.views.server_error"
