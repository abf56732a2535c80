"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from ...core import CATEGORIES_APP_ID, COURSES_APP_ID, LIVING_APPS_BASE_URL
from ...models import COURSE_STATUSES
from ...services.dashboard import STATUS_LABELS

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/config")
def get_config() -> Dict[str, Any]:
    """Expose frontend configuration values."""

    return {
        "record_store_url": LIVING_APPS_BASE_URL,
        "app_ids": {"categories": CATEGORIES_APP_ID, "courses": COURSES_APP_ID},
        "statuses": [
            {"value": status, "label": STATUS_LABELS[status]}
            for status in COURSE_STATUSES
        ],
    }


__all__ = ["router"]
