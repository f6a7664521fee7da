"""
IoT Asset Console - Django Settings

Settings are read from the environment, optionally seeded from a ``.env``
file next to manage.py:
    - DJANGO_SECRET_KEY: signing key (required outside DEBUG)
    - DJANGO_DEBUG: "1"/"true" enables debug mode and error details in 500s
    - DJANGO_ALLOWED_HOSTS: comma-separated host names
    - LOG_LEVEL: log level for the application loggers (default INFO)
    - RATELIMIT_ENABLE: "0"/"false" disables rate limiting
    - RATELIMIT_WRITES / RATELIMIT_TELEMETRY: django-ratelimit rate strings

There is no database: all data is held in process memory by the API app.

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file

For the full list of settings and their values, see
    https://docs.djangoproject.com/en/5.2/ref/settings/
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")


def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "y", "on")


DEBUG = _env_bool("DJANGO_DEBUG", False)

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "insecure-dev-key-change-me")

ALLOWED_HOSTS = [
    h.strip()
    for h in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")
    if h.strip()
]


# ---------------------------------------------------------------------------
# Applications
# ---------------------------------------------------------------------------

INSTALLED_APPS = [
    "django_ratelimit",
    "apps.api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django_ratelimit.middleware.RatelimitMiddleware",
]

ROOT_URLCONF = "config.urls"

WSGI_APPLICATION = "config.wsgi.application"
ASGI_APPLICATION = "config.asgi.application"

# In-memory stores only.
DATABASES = {}

USE_TZ = True
TIME_ZONE = "UTC"


# ---------------------------------------------------------------------------
# Rate limiting
# ---------------------------------------------------------------------------

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "iot-asset-console",
    }
}

RATELIMIT_ENABLE = _env_bool("RATELIMIT_ENABLE", True)
RATELIMIT_VIEW = "apps.api.ratelimits.ratelimited_error"
RATELIMIT_WRITES = os.getenv("RATELIMIT_WRITES", "120/m")
RATELIMIT_TELEMETRY = os.getenv("RATELIMIT_TELEMETRY", "60/m")

# LocMemCache is per process; good enough for a single-process console.
SILENCED_SYSTEM_CHECKS = ["django_ratelimit.E003", "django_ratelimit.W001"]


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "apps": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": True,
        },
        "config": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": True,
        },
        "django.request": {
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": False,
        },
    },
}
