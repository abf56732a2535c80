"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    CATEGORIES_APP_ID,
    COURSES_APP_ID,
    FRONTEND_ORIGIN,
    HOST,
    LIVING_APPS_BASE_URL,
    LIVING_APPS_COOKIE,
    LIVING_APPS_TIMEOUT,
    LOG_LEVEL,
    PORT,
    RELOAD,
)
from .errors import (
    BusyError,
    CourseDeskError,
    DecodeError,
    RecordNotFoundError,
    TransportError,
    ValidationError,
)
from .logging import configure_logging

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "CATEGORIES_APP_ID",
    "COURSES_APP_ID",
    "FRONTEND_ORIGIN",
    "HOST",
    "LIVING_APPS_BASE_URL",
    "LIVING_APPS_COOKIE",
    "LIVING_APPS_TIMEOUT",
    "LOG_LEVEL",
    "PORT",
    "RELOAD",
    "BusyError",
    "CourseDeskError",
    "DecodeError",
    "RecordNotFoundError",
    "TransportError",
    "ValidationError",
    "configure_logging",
]
