"""
CYF Hotels API — Request ID Middleware
========================================

What:  Assigns a short unique ID to each incoming request and adds it to the
       response.
How:   Uses the client's X-Request-ID header when present, otherwise a new
       UUID prefix; stores it in a ContextVar (for loggers and exception
       handlers) and in request.state, then echoes it in the response header.
Who:   Applied to every request via Starlette middleware.
When:  First middleware in the chain.

Unexpected exceptions:
    Anything the FastAPI exception handlers did not translate surfaces here.
    It is logged with its stack trace and answered with a generic 500 that
    still carries the X-Request-ID header.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.schemas.api import error_body

logger = logging.getLogger(__name__)

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again or contact support."


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a unique ID to each request for tracing."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 chars of a UUID4 is enough to correlate log lines
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "[%s] Unexpected error: %s %s: %s",
                rid,
                request.method,
                request.url.path,
                str(exc),
                exc_info=True,
            )
            response = JSONResponse(
                status_code=500,
                content=error_body("internal_server_error", UNEXPECTED_ERROR_MESSAGE, rid),
            )

        response.headers[REQUEST_ID_HEADER] = rid
        return response
