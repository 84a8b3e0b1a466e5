"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from shipdash_shared import __version__
from shipdash_shared.db import ShipmentStore

from shipdash_api.dependencies import get_store

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def ready(store: ShipmentStore = Depends(get_store)) -> JSONResponse:
    if not store.initialized:
        return JSONResponse(status_code=503, content={"status": "loading"})
    return JSONResponse(content={"status": "ready"})
