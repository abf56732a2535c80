"""Course management endpoints."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from ...services.dashboard import Dashboard, course_card, dashboard_view
from ...services.transform import course_form_from_body, course_form_from_local
from ..dependencies import get_dashboard

router = APIRouter(prefix="/api", tags=["courses"])


@router.get("/courses")
async def list_courses(dashboard: Dashboard = Depends(get_dashboard)) -> List[Dict[str, Any]]:
    """List all courses after a full reload."""

    state = await dashboard.load()
    return [course_card(course, state.categories) for course in state.courses]


@router.get("/courses/{record_id}")
async def get_course(record_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    """Get one course together with its prefilled edit form."""

    # category names come from the loaded state
    state = dashboard.state if dashboard.state.loaded else await dashboard.load()
    course = await dashboard.get_course(record_id)
    return {
        **course_card(course, state.categories),
        "form": course_form_from_local(course).model_dump(),
    }


@router.post("/courses")
async def create_course(body: Dict[str, Any], dashboard: Dashboard = Depends(get_dashboard)):
    """Create a course; enrollment starts at zero."""

    state = await dashboard.save_course(course_form_from_body(body))
    return {"ok": True, "dashboard": dashboard_view(state)}


@router.patch("/courses/{record_id}")
async def update_course(
    record_id: str, body: Dict[str, Any], dashboard: Dashboard = Depends(get_dashboard)
):
    """Update a course; the loaded enrollment count is carried over."""

    state = await dashboard.save_course(course_form_from_body(body), record_id)
    return {"ok": True, "dashboard": dashboard_view(state)}


@router.delete("/courses/{record_id}")
async def delete_course(record_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    """Delete a course by ID."""

    state = await dashboard.delete_course(record_id)
    return {"ok": True, "dashboard": dashboard_view(state)}


__all__ = ["router"]
