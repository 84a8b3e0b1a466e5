"""
shipdash_shared.models — Pydantic models for shipment records and derived views.

These models are used by:
- shipdash_api: validate aggregation results before they are sent
- shipdash_api.cli: render the dataset summary
"""

from shipdash_shared.models.companies import (
    CompaniesResponse,
    Commodity,
    CompanyDetail,
    CompanyListItem,
    MonthlyVolumeItem,
    Role,
    StatsResponse,
    TopCommodity,
    TradingPartner,
)
from shipdash_shared.models.shipments import Shipment, ShipmentsResponse

__all__ = [
    "Shipment",
    "ShipmentsResponse",
    "Role",
    "CompanyListItem",
    "CompaniesResponse",
    "TradingPartner",
    "Commodity",
    "CompanyDetail",
    "TopCommodity",
    "MonthlyVolumeItem",
    "StatsResponse",
]
