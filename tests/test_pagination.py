"""Tests for limit/offset parsing."""

from __future__ import annotations

import pytest

from shipdash_api.utils.filtering import limit_offset_clause, text_search_clause
from shipdash_api.utils.pagination import MAX_OFFSET, PaginationParams, parse_positive_int


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, 100),
        ("", 100),
        ("abc", 100),
        ("-1", 100),
        ("-50", 100),
        ("0", 0),
        ("25", 25),
        (" 25", 25),
        ("25abc", 25),
        ("3.9", 3),
        ("+7", 7),
        ("1000", 1000),
        ("1001", 1000),
        ("999999", 1000),
        (42, 42),
        (-3, 100),
        (True, 100),
    ],
)
def test_parse_positive_int(value, expected):
    assert parse_positive_int(value, 100, 1000) == expected


def test_parse_positive_int_without_maximum():
    assert parse_positive_int("5000", 0) == 5000


def test_pagination_params_defaults():
    params = PaginationParams(limit=None, offset=None)
    assert (params.limit, params.offset) == (100, 0)


def test_pagination_params_clamps_and_falls_back():
    params = PaginationParams(limit="5000", offset="-3")
    assert (params.limit, params.offset) == (1000, 0)


def test_text_search_clause_binds_term():
    clause, params = text_search_clause("name", "  Acme ")
    assert clause == "WHERE contains(lower(name), lower(?))"
    assert params == ["Acme"]


def test_text_search_clause_empty():
    assert text_search_clause("name", None) == ("", [])
    assert text_search_clause("name", "  ") == ("", [])


def test_limit_offset_clause():
    assert limit_offset_clause(10, 20) == "LIMIT 10 OFFSET 20"


def test_pagination_params_caps_huge_offset():
    params = PaginationParams(limit=None, offset="99999999999999999999999")
    assert params.offset == MAX_OFFSET
