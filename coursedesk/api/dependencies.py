"""FastAPI dependencies."""

from __future__ import annotations

from fastapi import Request

from ..services.dashboard import Dashboard


def get_dashboard(request: Request) -> Dashboard:
    """Return the dashboard created in the app lifespan."""

    return request.app.state.dashboard


__all__ = ["get_dashboard"]
