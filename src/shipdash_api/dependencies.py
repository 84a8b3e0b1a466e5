"""Shared FastAPI dependencies."""

from __future__ import annotations

from fastapi import Request

from shipdash_shared.db import ShipmentStore

from shipdash_api.utils.pagination import PaginationParams


def get_store(request: Request) -> ShipmentStore:
    """The ShipmentStore created by create_app()."""
    return request.app.state.store


__all__ = [
    "PaginationParams",
    "get_store",
]
