"""Category management endpoints."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from ...services.dashboard import Dashboard, dashboard_view
from ...services.transform import category_form_from_body
from ..dependencies import get_dashboard

router = APIRouter(prefix="/api", tags=["categories"])


@router.get("/categories")
async def list_categories(
    dashboard: Dashboard = Depends(get_dashboard),
) -> List[Dict[str, Any]]:
    state = await dashboard.load()
    return [category.model_dump() for category in state.categories]


@router.get("/categories/{record_id}")
async def get_category(record_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    category = await dashboard.get_category(record_id)
    return category.model_dump()


@router.post("/categories")
async def create_category(body: Dict[str, Any], dashboard: Dashboard = Depends(get_dashboard)):
    state = await dashboard.save_category(category_form_from_body(body))
    return {"ok": True, "dashboard": dashboard_view(state)}


@router.patch("/categories/{record_id}")
async def update_category(
    record_id: str, body: Dict[str, Any], dashboard: Dashboard = Depends(get_dashboard)
):
    state = await dashboard.save_category(category_form_from_body(body), record_id)
    return {"ok": True, "dashboard": dashboard_view(state)}


@router.delete("/categories/{record_id}")
async def delete_category(record_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    """Delete a category; courses pointing at it show up as uncategorized."""

    state = await dashboard.delete_category(record_id)
    return {"ok": True, "dashboard": dashboard_view(state)}


__all__ = ["router"]
