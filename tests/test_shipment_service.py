"""Tests for the shipment listing query."""

from __future__ import annotations

from datetime import date

from shipdash_api.services.shipment_service import list_shipments


def test_most_recent_first(store):
    data, total = list_shipments(store, limit=3, offset=0)

    assert total == 8
    assert [s["id"] for s in data] == ["SHP-0008", "SHP-0006", "SHP-0005"]


def test_offset_reaches_oldest(store):
    data, _ = list_shipments(store, limit=10, offset=7)

    assert [s["id"] for s in data] == ["SHP-0007"]
    assert data[0]["shipment_date"] == date(2023, 12, 28)


def test_rows_carry_every_column(store):
    data, _ = list_shipments(store, limit=1, offset=0)

    assert data[0] == {
        "id": "SHP-0008",
        "importer_name": "Acme Corp",
        "importer_country": "United States",
        "importer_website": "https://acme.example.com",
        "exporter_name": "Widget Works",
        "exporter_country": "Vietnam",
        "exporter_website": "https://widgetworks.example.vn",
        "commodity_name": "Cotton",
        "weight_metric_tonnes": 0.25,
        "shipment_date": date(2024, 3, 30),
    }


def test_pages_report_same_total(store):
    page1, total1 = list_shipments(store, limit=5, offset=0)
    page2, total2 = list_shipments(store, limit=5, offset=5)

    assert total1 == total2 == 8
    assert len(page1) == 5
    assert len(page2) == 3
    assert {s["id"] for s in page1}.isdisjoint({s["id"] for s in page2})
