"""Tests for the request logging middleware."""

from __future__ import annotations

from unittest.mock import ANY, MagicMock, patch
from urllib.parse import quote

import pytest


@pytest.fixture()
def request_log():
    """Patch the middleware's logger and yield the mock."""
    mock = MagicMock()
    with patch("shipdash_api.middleware.logging.logger", mock):
        yield mock


def test_logs_route_template_not_company_name(client, request_log):
    response = client.get("/companies/" + quote("O'Reilly Trading", safe=""))

    assert response.status_code == 200
    request_log.bind.assert_called_once_with(
        method="GET", route="/companies/{name}", query_params=[],
    )
    request_log.bind.return_value.info.assert_called_once_with(
        "request_completed", status=200, duration_ms=ANY,
    )
    assert "Reilly" not in repr(request_log.mock_calls)


def test_logs_query_param_names_only(client, request_log):
    client.get("/companies", params={"search": "acme", "limit": "2"})

    request_log.bind.assert_called_once_with(
        method="GET", route="/companies", query_params=["limit", "search"],
    )
    assert "acme" not in repr(request_log.mock_calls)


def test_unmatched_route(client, request_log):
    client.get("/nowhere")

    request_log.bind.assert_called_once_with(
        method="GET", route="<unmatched>", query_params=[],
    )
    request_log.bind.return_value.info.assert_called_once_with(
        "request_completed", status=404, duration_ms=ANY,
    )


@pytest.mark.parametrize("path", ["/health", "/ready"])
def test_health_endpoints_are_not_logged(client, request_log, path):
    client.get(path)

    request_log.bind.assert_not_called()
