"""
CYF Hotels API — Response Formatter
=====================================

What:  Serializes query rows into the JSON array the API returns.
How:   One JSON object per row, column names as keys. Values go through
       FastAPI's jsonable_encoder so timestamps, dates and Decimals become
       JSON-safe (ISO 8601 strings and numbers). No envelope, no pagination.
"""

from typing import Any, Mapping, Sequence

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def rows_to_json(rows: Sequence[Mapping[str, Any]]) -> list:
    """Convert rows to a list of JSON-safe dicts, preserving row order."""
    return jsonable_encoder([dict(row) for row in rows])


def format_rows(rows: Sequence[Mapping[str, Any]], status_code: int = 200) -> JSONResponse:
    """Build the HTTP response for a result set. Empty result → `[]`."""
    return JSONResponse(status_code=status_code, content=rows_to_json(rows))
