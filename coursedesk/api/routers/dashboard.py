"""Dashboard overview endpoint."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from ...models import COURSE_STATUSES
from ...services.dashboard import ALL, Dashboard, dashboard_view
from ..dependencies import get_dashboard

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/dashboard")
async def get_overview(
    category: str = ALL,
    status: str = ALL,
    dashboard: Dashboard = Depends(get_dashboard),
) -> Dict[str, Any]:
    """Reload both collections and return stats, categories and filtered courses."""

    if status != ALL and status not in COURSE_STATUSES:
        raise HTTPException(400, f"Unknown status filter: {status}")

    state = await dashboard.load()
    return dashboard_view(state, category=category, status=status)


__all__ = ["router"]
