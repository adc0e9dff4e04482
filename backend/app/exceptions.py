"""
CYF Hotels API — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the error scenarios of a read-only
       query gateway.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by the route table, the query executor and route handlers;
       caught by global handlers.

Exception Hierarchy:
    HotelsApiError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    └── QueryError               → 500 Internal Server Error
        └── QueryTimeoutError    → 504 Gateway Timeout

A lookup that matches no rows is NOT an error: item routes answer `[]`.
"""

from typing import Any, Dict, Optional


class HotelsApiError(Exception):
    """
    Base exception for all CYF Hotels API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(HotelsApiError):
    """
    Raised when a path parameter fails validation.

    When:    Non-numeric or out-of-range identifier / room number.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Path parameter 'id' must be an integer",
            "details": {"field": "id", "value": "1 OR 1=1"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(HotelsApiError):
    """
    Raised when a requested file does not exist.

    When:    The static entry page is missing from STATIC_ROOT.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class QueryError(HotelsApiError):
    """
    Raised when a query against the relational store fails.

    What:    Covers connectivity failures, malformed SQL and type mismatches
             reported by the store, plus an uninitialized connection pool.
    HTTP:    500 Internal Server Error

    Attributes:
        cause: The underlying driver / SQLAlchemy exception, if any.

    The message returned to the client is always generic; SQL text and driver
    messages live in `context` and are logged server-side only.
    """

    def __init__(
        self,
        message: str = "The database query failed. Please try again later.",
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if cause is not None:
            ctx["cause"] = f"{type(cause).__name__}: {cause}"
        super().__init__(message=message, context=ctx)
        self.cause = cause


class QueryTimeoutError(QueryError):
    """
    Raised when a query does not complete within QUERY_TIMEOUT_SECONDS.

    HTTP:    504 Gateway Timeout

    The connection held by the query has already been returned to the pool
    when this is raised.
    """

    def __init__(
        self,
        timeout: float,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["timeout_seconds"] = timeout
        super().__init__(
            message=f"The database did not respond within {timeout:g} seconds.",
            context=ctx,
        )
        self.timeout = timeout
