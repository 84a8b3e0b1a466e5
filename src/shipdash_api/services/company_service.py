"""
Company aggregation service.

A company is identified by (name, country). It is never stored: every query
derives it from the shipments table by aggregating the importer side and the
exporter side independently, stacking both with UNION ALL and grouping again
on the composite key. Weights are converted from metric tonnes to integer
kilograms inside each per-role group, before the cross-role sum.
"""

from __future__ import annotations

from typing import Any

import structlog

from shipdash_shared.db import ShipmentStore
from shipdash_shared.models import Role

from shipdash_api.utils.filtering import limit_offset_clause, text_search_clause

logger = structlog.get_logger(__name__)

TOP_N = 5

_COMPANY_TOTALS = """
WITH importers AS (
    SELECT
        importer_name AS name,
        importer_country AS country,
        COUNT(*) AS shipments,
        CAST(SUM(weight_metric_tonnes * 1000) AS BIGINT) AS weight
    FROM shipments
    GROUP BY importer_name, importer_country
),
exporters AS (
    SELECT
        exporter_name AS name,
        exporter_country AS country,
        COUNT(*) AS shipments,
        CAST(SUM(weight_metric_tonnes * 1000) AS BIGINT) AS weight
    FROM shipments
    GROUP BY exporter_name, exporter_country
),
companies AS (
    SELECT
        name,
        country,
        CAST(SUM(shipments) AS BIGINT) AS total_shipments,
        CAST(SUM(weight) AS BIGINT) AS total_weight
    FROM (
        SELECT * FROM importers
        UNION ALL
        SELECT * FROM exporters
    ) combined
    GROUP BY name, country
)
"""


def derive_role(is_importer: bool, is_exporter: bool) -> Role:
    """Classify a company from the roles it was observed in."""
    if is_importer and is_exporter:
        return "both"
    if is_importer:
        return "importer"
    return "exporter"


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------


def list_companies(
    store: ShipmentStore,
    *,
    limit: int = 100,
    offset: int = 0,
    search: str | None = None,
) -> tuple[list[dict[str, Any]], int]:
    """
    One page of companies ranked by total shipment count, plus the number of
    distinct (name, country) pairs matching ``search`` (all pairs when unset).
    """
    where, params = text_search_clause("name", search)

    total = store.scalar(
        f"{_COMPANY_TOTALS} SELECT COUNT(*) AS total FROM companies {where}",
        params,
    )
    data = store.query(
        f"""
        {_COMPANY_TOTALS}
        SELECT name, country, total_shipments, total_weight
        FROM companies
        {where}
        ORDER BY total_shipments DESC, name, country
        {limit_offset_clause(limit, offset)}
        """,
        params,
    )
    return data, int(total or 0)


def transform_shipments_to_companies(store: ShipmentStore) -> list[dict[str, Any]]:
    """Every company, unpaginated, in the same order as ``list_companies``."""
    return store.query(
        f"""
        {_COMPANY_TOTALS}
        SELECT name, country, total_shipments, total_weight
        FROM companies
        ORDER BY total_shipments DESC, name, country
        """
    )


# ---------------------------------------------------------------------------
# Detail
# ---------------------------------------------------------------------------


def get_company_detail(store: ShipmentStore, name: str) -> dict[str, Any] | None:
    """
    Totals, role, top partners and top commodities for an exact company name.

    The name is matched case-sensitively against both roles and across every
    country it appears under. Returns None when it matches no row.
    """
    groups = store.query(
        """
        SELECT role, country, website,
               CAST(shipments AS BIGINT) AS shipments,
               CAST(weight AS BIGINT) AS weight
        FROM (
            SELECT
                'importer' AS role,
                0 AS role_rank,
                importer_country AS country,
                importer_website AS website,
                COUNT(*) AS shipments,
                SUM(weight_metric_tonnes * 1000) AS weight
            FROM shipments
            WHERE importer_name = ?
            GROUP BY importer_country, importer_website
            UNION ALL
            SELECT
                'exporter' AS role,
                1 AS role_rank,
                exporter_country AS country,
                exporter_website AS website,
                COUNT(*) AS shipments,
                SUM(weight_metric_tonnes * 1000) AS weight
            FROM shipments
            WHERE exporter_name = ?
            GROUP BY exporter_country, exporter_website
        ) grouped
        ORDER BY role_rank, shipments DESC, country, website
        """,
        [name, name],
    )
    if not groups:
        return None

    role = derive_role(
        any(g["role"] == "importer" for g in groups),
        any(g["role"] == "exporter" for g in groups),
    )
    website = next((g["website"] for g in groups if g["website"]), None)

    partners = store.query(
        f"""
        SELECT name, country, CAST(SUM(shipments) AS BIGINT) AS shipments
        FROM (
            SELECT exporter_name AS name, exporter_country AS country, COUNT(*) AS shipments
            FROM shipments
            WHERE importer_name = ?
            GROUP BY exporter_name, exporter_country
            UNION ALL
            SELECT importer_name AS name, importer_country AS country, COUNT(*) AS shipments
            FROM shipments
            WHERE exporter_name = ?
            GROUP BY importer_name, importer_country
        ) counterparties
        GROUP BY name, country
        ORDER BY shipments DESC, name, country
        LIMIT {TOP_N}
        """,
        [name, name],
    )

    commodities = store.query(
        f"""
        SELECT
            commodity_name AS name,
            CAST(SUM(weight_metric_tonnes * 1000) AS BIGINT) AS kg
        FROM shipments
        WHERE importer_name = ? OR exporter_name = ?
        GROUP BY commodity_name
        ORDER BY kg DESC, name
        LIMIT {TOP_N}
        """,
        [name, name],
    )

    logger.debug("company_detail_built", company=name, role=role, groups=len(groups))
    return {
        "name": name,
        "country": groups[0]["country"],
        "website": website,
        "role": role,
        "total_shipments": sum(g["shipments"] for g in groups),
        "total_weight": sum(g["weight"] for g in groups),
        "top_trading_partners": partners,
        "top_commodities": commodities,
    }


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------


def get_company_stats(store: ShipmentStore) -> dict[str, Any]:
    """
    Dashboard statistics over the whole dataset.

    A company name present in both roles counts toward both
    ``total_importers`` and ``total_exporters``.
    """
    counts = store.query(
        """
        SELECT
            COUNT(DISTINCT importer_name) AS total_importers,
            COUNT(DISTINCT exporter_name) AS total_exporters
        FROM shipments
        """
    )

    top_commodities = store.query(
        f"""
        SELECT
            commodity_name AS commodity,
            CAST(SUM(weight_metric_tonnes * 1000) AS BIGINT) AS kg
        FROM shipments
        GROUP BY commodity_name
        ORDER BY kg DESC, commodity
        LIMIT {TOP_N}
        """
    )

    monthly_volume = store.query(
        """
        SELECT
            strftime(MIN(CAST(shipment_date AS DATE)), '%b %Y') AS month,
            CAST(SUM(weight_metric_tonnes * 1000) AS BIGINT) AS kg
        FROM shipments
        GROUP BY strftime(CAST(shipment_date AS DATE), '%Y-%m')
        ORDER BY strftime(MIN(CAST(shipment_date AS DATE)), '%Y-%m')
        """
    )

    first = counts[0] if counts else {}
    return {
        "total_importers": first.get("total_importers") or 0,
        "total_exporters": first.get("total_exporters") or 0,
        "top_commodities": top_commodities,
        "monthly_volume": monthly_volume,
    }
