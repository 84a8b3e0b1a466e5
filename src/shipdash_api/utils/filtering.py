"""Query parameter parsing and SQL filter builders."""

from __future__ import annotations

from typing import Any


def text_search_clause(
    column: str,
    search_term: str | None,
) -> tuple[str, list[Any]]:
    """
    Build a case-insensitive substring filter on ``column``.

    Returns a ``WHERE`` fragment (empty when there is nothing to filter) and
    its bound parameters. The term is matched literally, so ``%`` and ``_``
    carry no wildcard meaning.
    """
    term = (search_term or "").strip()
    if not term:
        return "", []
    return f"WHERE contains(lower({column}), lower(?))", [term]


def limit_offset_clause(limit: int, offset: int) -> str:
    """Render LIMIT/OFFSET from already-validated integers."""
    return f"LIMIT {int(limit)} OFFSET {int(offset)}"
