"""
CYF Hotels API — Health Check Route
=====================================

What:  Health check endpoint for monitoring and load balancer checks.
How:   Runs SELECT 1 through the shared query executor, so the check gets the
       same timeout and connection release as every table query.
Who:   Called by container health checks, load balancers and monitoring.

Status levels:
    - healthy:   Database reachable (HTTP 200)
    - unhealthy: Database unreachable, stalled or pool not initialized (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response

from app import __version__
from app.exceptions import QueryError
from app.schemas.api import HealthResponse
from app.services.query_executor import QueryExecutor, get_query_executor

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    executor: QueryExecutor = Depends(get_query_executor),
) -> HealthResponse:
    """
    Check that the hotel database answers a trivial query in time.

    A QueryError (including a timeout) marks the service unhealthy; the cause
    is logged, not returned.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        await executor.fetch_all("SELECT 1")
    except QueryError as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: database unreachable: %s | Context: %s", e.message, e.context)

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
