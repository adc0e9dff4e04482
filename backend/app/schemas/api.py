"""
CYF Hotels API — Pydantic Response Schemas
============================================

What:  Pydantic models for the parts of the API contract that have a fixed
       shape: error bodies and the health check.
How:   Route decorators reference these in `responses=` / `response_model=`
       so they appear in the generated OpenAPI document.

Query results are NOT modeled here: rows are pass-through and every table
route returns a plain JSON array of objects keyed by column name.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "Path parameter 'id' must be an integer",
            "details": {"field": "id", "value": "abc"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


def error_body(
    error: str,
    message: str,
    request_id: str,
    details: Optional[dict] = None,
) -> dict:
    """Build an ErrorResponse payload, omitting empty `details`."""
    return ErrorResponse(
        error=error,
        message=message,
        details=details or None,
        request_id=request_id,
    ).model_dump(exclude_none=True)
