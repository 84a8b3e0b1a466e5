"""Shipment data service."""

from __future__ import annotations

from typing import Any

from shipdash_shared.db import ShipmentStore

from shipdash_api.utils.filtering import limit_offset_clause

_SHIPMENT_COLUMNS = """
    CAST(id AS VARCHAR) AS id,
    importer_name,
    importer_country,
    importer_website,
    exporter_name,
    exporter_country,
    exporter_website,
    commodity_name,
    CAST(weight_metric_tonnes AS DOUBLE) AS weight_metric_tonnes,
    CAST(shipment_date AS DATE) AS shipment_date
"""


def list_shipments(
    store: ShipmentStore,
    *,
    limit: int = 100,
    offset: int = 0,
) -> tuple[list[dict[str, Any]], int]:
    """Raw shipment records, most recent first, plus the total row count."""
    total = store.scalar("SELECT COUNT(*) AS total FROM shipments") or 0
    data = store.query(
        f"""
        SELECT {_SHIPMENT_COLUMNS}
        FROM shipments
        ORDER BY shipment_date DESC, id
        {limit_offset_clause(limit, offset)}
        """
    )
    return data, int(total)
