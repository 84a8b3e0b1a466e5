"""Tests for response models and their coercion rules."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from shipdash_shared.models import (
    CompaniesResponse,
    CompanyDetail,
    CompanyListItem,
    MonthlyVolumeItem,
    Shipment,
    StatsResponse,
)


def test_numeric_text_is_coerced():
    item = CompanyListItem.from_db_row(
        {"name": "Acme Corp", "country": "Germany", "total_shipments": "12", "total_weight": "3400"}
    )
    assert item.total_shipments == 12
    assert item.total_weight == 3400


def test_camel_case_output():
    response = CompaniesResponse.model_validate(
        {
            "data": [
                {"name": "Globex", "country": "China", "total_shipments": 4, "total_weight": 20000},
            ],
            "total": "1",
        }
    )
    assert response.model_dump(by_alias=True) == {
        "data": [
            {"name": "Globex", "country": "China", "totalShipments": 4, "totalWeight": 20000},
        ],
        "total": 1,
    }


def test_camel_case_input_is_accepted():
    item = CompanyListItem.model_validate(
        {"name": "Globex", "country": "China", "totalShipments": 4, "totalWeight": 20000}
    )
    assert item.total_shipments == 4


def test_role_is_a_closed_set():
    with pytest.raises(ValidationError):
        CompanyDetail.model_validate(
            {
                "name": "Globex",
                "country": "China",
                "role": "buyer",
                "total_shipments": 1,
                "total_weight": 1,
            }
        )


def test_non_numeric_total_is_rejected():
    with pytest.raises(ValidationError):
        StatsResponse.model_validate({"total_importers": "many", "total_exporters": 1})


@pytest.mark.parametrize("label", ["Jan 2024", "Dec 1999"])
def test_month_label_accepted(label):
    assert MonthlyVolumeItem(month=label, kg=1).month == label


@pytest.mark.parametrize("label", ["2024-01", "january 2024", "JAN 2024", "Jan 24"])
def test_month_label_rejected(label):
    with pytest.raises(ValidationError):
        MonthlyVolumeItem(month=label, kg=1)


def test_shipment_from_db_row():
    shipment = Shipment.from_db_row(
        {
            "id": "SHP-1",
            "importer_name": "Initech",
            "importer_country": "Mexico",
            "importer_website": None,
            "exporter_name": "Globex",
            "exporter_country": "China",
            "exporter_website": None,
            "commodity_name": "Steel",
            "weight_metric_tonnes": "4.5",
            "shipment_date": "2024-02-01",
        }
    )
    assert shipment.weight_metric_tonnes == 4.5
    assert shipment.shipment_date == date(2024, 2, 1)
