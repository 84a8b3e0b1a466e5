"""FastAPI application factory."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shipdash_shared import __version__
from shipdash_shared.config import Settings, settings as default_settings
from shipdash_shared.db import ShipmentStore

from shipdash_api.middleware.logging import LoggingMiddleware
from shipdash_api.responses import error_response
from shipdash_api.routers import api_router
from shipdash_api.routers.health import router as health_router
from shipdash_api.utils.logging import configure_logging

logger = structlog.get_logger()


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _request_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request_rejected", path=request.url.path, errors=exc.errors())
    return error_response(400, "Invalid request parameters")


def create_app(
    config: Settings | None = None,
    store: ShipmentStore | None = None,
) -> FastAPI:
    """
    Build the API.

    Args:
        config: Settings to use (the module-level ``settings`` by default).
        store:  Pre-built ShipmentStore; one is created from ``config`` if omitted.
    """
    cfg = config or default_settings
    configure_logging(cfg.log_level, cfg.log_format)
    shipment_store = store or ShipmentStore.from_settings(cfg)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.store.initialize()
        yield
        app.state.store.close()

    app = FastAPI(
        title="shipdash API",
        description="Read-only analytics over the shipment dataset",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.store = shipment_store

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _request_error)

    # Routers
    app.include_router(health_router)
    app.include_router(api_router)

    logger.info(
        "app_created",
        cors_origins=cfg.cors_origins_list,
        dataset_path=str(shipment_store.dataset_path),
    )
    return app


app = create_app()
