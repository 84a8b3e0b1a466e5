"""
models/companies.py — Pydantic models for company-level aggregates.

None of these are stored: they are built per request from the shipments
table. Numeric fields use lax coercion so values that arrive as text (e.g.
"1250") validate as integers. JSON output uses camelCase field names while
the service layer populates them by their snake_case names.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Role = Literal["importer", "exporter", "both"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CompanyListItem(_CamelModel):
    """One (name, country) company with totals across both roles."""

    name: str
    country: str
    total_shipments: int
    total_weight: int  # kg

    @classmethod
    def from_db_row(cls, row: dict[str, Any]) -> "CompanyListItem":
        return cls(**row)


class CompaniesResponse(_CamelModel):
    data: list[CompanyListItem] = Field(default_factory=list)
    total: int


class TradingPartner(_CamelModel):
    name: str
    country: str
    shipments: int


class Commodity(_CamelModel):
    name: str
    kg: int


class CompanyDetail(_CamelModel):
    name: str
    country: str
    website: str | None = None
    role: Role
    total_shipments: int
    total_weight: int  # kg
    top_trading_partners: list[TradingPartner] = Field(default_factory=list)
    top_commodities: list[Commodity] = Field(default_factory=list)


class TopCommodity(_CamelModel):
    commodity: str
    kg: int


class MonthlyVolumeItem(_CamelModel):
    month: str = Field(pattern=r"^[A-Z][a-z]{2} \d{4}$")
    kg: int


class StatsResponse(_CamelModel):
    """Dashboard-wide statistics."""

    total_importers: int
    total_exporters: int
    top_commodities: list[TopCommodity] = Field(default_factory=list)
    monthly_volume: list[MonthlyVolumeItem] = Field(default_factory=list)
