from django.urls import re_path
from . import views

# Every route accepts an optional trailing slash, matching the browser client.
urlpatterns = [
    # Resources
    re_path(r"^asset-profiles/?$", views.asset_profiles_collection, name="asset-profiles"),
    re_path(r"^asset-profiles/(?P<record_id>[^/]+)/?$", views.asset_profile_detail, name="asset-profile-detail"),
    re_path(r"^device-profiles/?$", views.device_profiles_collection, name="device-profiles"),
    re_path(r"^device-profiles/(?P<record_id>[^/]+)/?$", views.device_profile_detail, name="device-profile-detail"),
    re_path(r"^assets/?$", views.assets_collection, name="assets"),
    re_path(r"^assets/(?P<record_id>[^/]+)/?$", views.asset_detail, name="asset-detail"),
    re_path(r"^devices/?$", views.devices_collection, name="devices"),
    re_path(r"^devices/(?P<record_id>[^/]+)/?$", views.device_detail, name="device-detail"),

    # Attributes
    re_path(r"^attributes/?$", views.list_attributes, name="attributes"),
    re_path(
        r"^attributes/(?P<entity_type>[^/]+)/(?P<entity_id>[^/]+)/(?P<scope>[^/]+)/?$",
        views.save_attributes,
        name="save-attributes",
    ),
    re_path(
        r"^attributes/(?P<entity_type>[^/]+)/(?P<entity_id>[^/]+)/(?P<scope>[^/]+)/(?P<key>[^/]+)/?$",
        views.delete_attribute,
        name="delete-attribute",
    ),

    # Telemetry
    re_path(
        r"^telemetry/(?P<entity_type>[^/]+)/(?P<entity_id>[^/]+)/values/timeseries/?$",
        views.telemetry_timeseries,
        name="telemetry-timeseries",
    ),
    re_path(
        r"^telemetry/(?P<entity_type>[^/]+)/(?P<entity_id>[^/]+)/timeseries/delete/?$",
        views.delete_telemetry,
        name="telemetry-delete",
    ),
    re_path(
        r"^telemetry/(?P<entity_type>[^/]+)/(?P<entity_id>[^/]+)/?$",
        views.ingest_telemetry,
        name="telemetry-ingest",
    ),
]
