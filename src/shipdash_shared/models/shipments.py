"""
models/shipments.py — Pydantic models for the shipments table.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field


class Shipment(BaseModel):
    """Matches a shipments table row."""

    id: str
    importer_name: str
    importer_country: str | None = None
    importer_website: str | None = None
    exporter_name: str
    exporter_country: str | None = None
    exporter_website: str | None = None
    commodity_name: str
    weight_metric_tonnes: float
    shipment_date: date

    @classmethod
    def from_db_row(cls, row: dict[str, Any]) -> "Shipment":
        return cls(**row)


class ShipmentsResponse(BaseModel):
    """Paginated shipment listing."""

    data: list[Shipment] = Field(default_factory=list)
    total: int
