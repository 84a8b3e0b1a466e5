"""Shipment endpoints."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from shipdash_shared.db import ShipmentStore
from shipdash_shared.models import ShipmentsResponse

from shipdash_api.dependencies import PaginationParams, get_store
from shipdash_api.responses import ApiError, error_response, model_response
from shipdash_api.services import shipment_service

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/shipments", tags=["shipments"])


@router.get(
    "",
    response_model=ShipmentsResponse,
    responses={400: {"model": ApiError}, 500: {"model": ApiError}},
    summary="Raw shipment records, most recent first",
)
def list_shipments(
    pagination: PaginationParams = Depends(),
    store: ShipmentStore = Depends(get_store),
) -> JSONResponse:
    try:
        data, total = shipment_service.list_shipments(
            store, limit=pagination.limit, offset=pagination.offset,
        )
        validated = ShipmentsResponse.model_validate({"data": data, "total": total})
    except ValidationError as exc:
        logger.error("response_validation_failed", endpoint="shipments", errors=exc.errors())
        return error_response(400, "Invalid response data")
    except Exception:
        logger.exception("shipments_fetch_failed")
        return error_response(500, "Failed to fetch shipments")
    return model_response(validated)
