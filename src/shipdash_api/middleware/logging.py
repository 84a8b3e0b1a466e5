"""
Structured request logging middleware.

Requests are logged by their route template (``/companies/{name}``), never
by the decoded path, so company names and search terms stay out of the log.
Health and readiness checks are not logged.
"""

from __future__ import annotations

import time

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = structlog.get_logger(__name__)

UNLOGGED_PATHS = frozenset({"/health", "/ready"})


def _route_template(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path_format", None) or "<unmatched>"


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in UNLOGGED_PATHS:
            return await call_next(request)

        start = time.monotonic()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.bind(
                method=request.method,
                route=_route_template(request),
            ).error(
                "request_failed",
                error=type(exc).__name__,
                duration_ms=round((time.monotonic() - start) * 1000, 2),
            )
            raise

        logger.bind(
            method=request.method,
            route=_route_template(request),
            query_params=sorted(request.query_params.keys()),
        ).info(
            "request_completed",
            status=response.status_code,
            duration_ms=round((time.monotonic() - start) * 1000, 2),
        )
        return response
