"""Service layer helpers."""

from .dashboard import Dashboard, DashboardState, dashboard_view
from .living_apps import LivingAppsClient, RecordCollection, build_http_client
from .transform import (
    course_to_fields,
    course_to_local,
    category_to_local,
    create_record_url,
    extract_record_id,
)

__all__ = [
    "Dashboard",
    "DashboardState",
    "LivingAppsClient",
    "RecordCollection",
    "build_http_client",
    "category_to_local",
    "course_to_fields",
    "course_to_local",
    "create_record_url",
    "dashboard_view",
    "extract_record_id",
]
