"""
IoT Asset Console - API Application

This Django application provides the REST API: CRUD over asset profiles,
device profiles, assets and devices, plus scoped attributes and telemetry
time-series for assets and devices.

Author:     Gonzalo Patino
Created:    2025
Course:     Southern New Hampshire University
License:    Academic Use Only - See LICENSE file
"""
