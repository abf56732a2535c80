"""Aggregate API routers."""

from fastapi import APIRouter

from .categories import router as categories_router
from .courses import router as courses_router
from .dashboard import router as dashboard_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    dashboard_router,
    categories_router,
    courses_router,
)

__all__ = ["ALL_ROUTERS"]
