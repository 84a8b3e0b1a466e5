"""Limit/offset pagination helpers."""

from __future__ import annotations

import re

from fastapi import Query

from shipdash_shared.config import settings

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Far past any dataset, and well under the largest OFFSET DuckDB accepts.
MAX_OFFSET = 2**53


def parse_positive_int(value: object, default: int, maximum: int | None = None) -> int:
    """
    Leniently parse a query-string value into a non-negative integer.

    Only the leading integer is read ("25abc" -> 25, "3.9" -> 3). Missing,
    non-numeric or negative input falls back to ``default``; anything above
    ``maximum`` is clamped to it.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        parsed = value
    else:
        match = _LEADING_INT.match(str(value)) if value is not None else None
        if match is None:
            return default
        parsed = int(match.group(1))

    if parsed < 0:
        return default
    if maximum is not None and parsed > maximum:
        return maximum
    return parsed


class PaginationParams:
    """Dependency for extracting limit/offset query params."""

    def __init__(
        self,
        limit: str | None = Query(
            None, description=f"Page size (default {settings.default_page_size}, max {settings.max_page_size})"
        ),
        offset: str | None = Query(None, description="Number of rows to skip"),
    ) -> None:
        self.limit = parse_positive_int(
            limit, settings.default_page_size, settings.max_page_size
        )
        self.offset = parse_positive_int(offset, 0, MAX_OFFSET)
