"""Standardized API response helpers."""

from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ApiError(BaseModel):
    error: str


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a ``{"error": message}`` JSON response."""
    return JSONResponse(status_code=status_code, content={"error": message})


def model_response(
    model: BaseModel,
    *,
    status_code: int = 200,
    exclude_none: bool = False,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Serialize a validated model with its public (camelCase) field names."""
    content: Any = model.model_dump(mode="json", by_alias=True, exclude_none=exclude_none)
    return JSONResponse(status_code=status_code, content=content, headers=headers)
