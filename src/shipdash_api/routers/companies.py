"""
Company endpoints.

Serves /companies, /companies/stats and /companies/{name}. Each handler
validates the aggregation result against its response model before sending
it: a result that fails validation is reported as 400 and logged, any other
failure as 500 without internal detail.
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from shipdash_shared.db import ShipmentStore
from shipdash_shared.models import CompaniesResponse, CompanyDetail, StatsResponse

from shipdash_api.dependencies import PaginationParams, get_store
from shipdash_api.responses import ApiError, error_response, model_response
from shipdash_api.services import company_service

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/companies", tags=["companies"])

_ERRORS = {400: {"model": ApiError}, 500: {"model": ApiError}}


# ---------------------------------------------------------------------------
# GET /companies
# ---------------------------------------------------------------------------


@router.get(
    "",
    response_model=CompaniesResponse,
    responses=_ERRORS,
    summary="Companies ranked by shipment count",
)
def list_companies(
    pagination: PaginationParams = Depends(),
    search: str | None = Query(None, description="Case-insensitive name filter"),
    store: ShipmentStore = Depends(get_store),
) -> JSONResponse:
    """
    One page of companies, each identified by (name, country), with shipment
    count and weight (kg) summed over both importer and exporter roles.
    """
    try:
        data, total = company_service.list_companies(
            store, limit=pagination.limit, offset=pagination.offset, search=search,
        )
        validated = CompaniesResponse.model_validate({"data": data, "total": total})
    except ValidationError as exc:
        logger.error("response_validation_failed", endpoint="companies", errors=exc.errors())
        return error_response(400, "Invalid response data")
    except Exception:
        logger.exception("companies_fetch_failed")
        return error_response(500, "Failed to fetch companies")
    return model_response(validated)


# ---------------------------------------------------------------------------
# GET /companies/stats
# ---------------------------------------------------------------------------


@router.get(
    "/stats",
    response_model=StatsResponse,
    responses=_ERRORS,
    summary="Dashboard statistics",
)
def company_stats(store: ShipmentStore = Depends(get_store)) -> JSONResponse:
    """
    Distinct importer and exporter counts, the top 5 commodities by weight and
    the shipped weight per calendar month.
    """
    try:
        stats = company_service.get_company_stats(store)
        validated = StatsResponse.model_validate(stats)
    except ValidationError as exc:
        logger.error("response_validation_failed", endpoint="companies/stats", errors=exc.errors())
        return error_response(400, "Invalid response data")
    except Exception:
        logger.exception("company_stats_failed")
        return error_response(500, "Failed to fetch company stats")
    return model_response(validated)


# ---------------------------------------------------------------------------
# GET /companies/{name}
# ---------------------------------------------------------------------------


@router.get(
    "/{name:path}",
    response_model=CompanyDetail,
    response_model_exclude_none=True,
    responses={**_ERRORS, 404: {"model": ApiError}},
    summary="Detail for one company",
)
def company_detail(name: str, store: ShipmentStore = Depends(get_store)) -> JSONResponse:
    """
    Role, totals, top 5 trading partners and top 5 commodities for the exact
    (case-sensitive) company name. The path segment is URL-decoded.
    """
    if not name.strip():
        return error_response(400, "Company name is required")

    try:
        detail = company_service.get_company_detail(store, name)
        if detail is None:
            return error_response(404, "Company not found")
        validated = CompanyDetail.model_validate(detail)
    except ValidationError as exc:
        logger.error(
            "response_validation_failed",
            endpoint="companies/detail",
            company=name,
            errors=exc.errors(),
        )
        return error_response(400, "Invalid response data")
    except Exception:
        logger.exception("company_detail_failed", company=name)
        return error_response(500, "Failed to fetch company detail")
    return model_response(validated, exclude_none=True)
