"""Application settings and environment helpers."""

from __future__ import annotations

import os
from typing import Iterable, List, Optional

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: Optional[float]) -> Optional[float]:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    if raw.lower() in {"none", "off"}:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Living Apps record store ---------------------------------------------------
LIVING_APPS_BASE_URL = os.getenv(
    "LIVING_APPS_BASE_URL", "https://my.living-apps.de/rest"
).rstrip("/")

CATEGORIES_APP_ID = os.getenv("CATEGORIES_APP_ID", "698dcc61d32d3b471f096328")
COURSES_APP_ID = os.getenv("COURSES_APP_ID", "698dcc627dbdb3ef3a55e3b6")

# Raw Cookie header forwarded to the record store (session credentials).
LIVING_APPS_COOKIE = os.getenv("LIVING_APPS_COOKIE") or None

LIVING_APPS_TIMEOUT = _env_float("LIVING_APPS_TIMEOUT", 30.0)


# Frontend / CORS ------------------------------------------------------------
# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *_local_dev_origins,
    ]
)

FRONTEND_ORIGIN = _frontend_origins[0] if _frontend_origins else ""


# Runtime behaviour ----------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
RELOAD = _env_bool("RELOAD", False)
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))


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
]
