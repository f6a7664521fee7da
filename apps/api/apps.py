"""
IoT Asset Console - API Application Configuration

Django application configuration for the API app. The in-memory stores are
created here, once per process, and handed to views through the app registry.

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file
"""

import logging

from django.apps import AppConfig, apps

logger = logging.getLogger(__name__)


class ApiConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.api'
    label = 'api'

    def ready(self):
        self.reset_stores()

    def reset_stores(self):
        """Build fresh, empty stores. Any previously stored data is dropped."""
        from .models import RESOURCES
        from .stores import AttributeStore, EntityStore, TelemetryStore

        self.attributes = AttributeStore()
        self.telemetry = TelemetryStore()
        self.resources = {d.name: EntityStore(d) for d in RESOURCES}
        logger.debug("Initialized stores: attributes, telemetry, %s", ", ".join(self.resources))


def get_api_config() -> ApiConfig:
    return apps.get_app_config("api")
