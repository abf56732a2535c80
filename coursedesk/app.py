"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    BusyError,
    DecodeError,
    RecordNotFoundError,
    TransportError,
    ValidationError,
    configure_logging,
)
from .services import Dashboard, LivingAppsClient, build_http_client

logger = logging.getLogger(__name__)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400, content={"detail": str(exc), "missing": exc.missing}
        )

    @app.exception_handler(BusyError)
    async def _busy_error(request: Request, exc: BusyError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(RecordNotFoundError)
    async def _not_found(request: Request, exc: RecordNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(TransportError)
    async def _transport_error(request: Request, exc: TransportError) -> JSONResponse:
        return JSONResponse(
            status_code=502,
            content={"detail": exc.text, "upstream_status": exc.status_code},
        )

    @app.exception_handler(DecodeError)
    async def _decode_error(request: Request, exc: DecodeError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": str(exc)})


def create_app(transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    """Build the app; ``transport`` replaces the network layer of the record client."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with build_http_client(transport) as http:
            app.state.dashboard = Dashboard(LivingAppsClient(http))
            logger.info("Course dashboard ready")
            yield

    app = FastAPI(title="Course Dashboard API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)
    register_routes(app)
    return app


configure_logging()
app = create_app()


__all__ = ["app", "create_app"]
