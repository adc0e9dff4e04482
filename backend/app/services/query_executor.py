"""
CYF Hotels API — Query Executor
=================================

What:  Runs one parameterized SQL statement against the shared pool and
       returns the full result set as a list of plain dicts.
How:   Borrows a connection with `async with engine.connect()`, executes a
       `text()` construct with bound parameters, and converts each row to a
       column → value mapping. The whole cycle runs under asyncio.wait_for so
       a slow query cannot hold its connection indefinitely.
Who:   Called by the hotel route handlers.

Failure mapping:
    SQLAlchemyError / OSError  → QueryError (cause attached, logged)
    asyncio.TimeoutError       → QueryTimeoutError (logged)
    pool not initialized       → QueryError (from get_engine)

Parameter values are only ever passed as bind parameters. SQL text never
contains request data.
"""

import asyncio
import logging
import time
from typing import Any, Callable, Dict, List, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.config import settings
from app.database import get_engine
from app.exceptions import QueryError, QueryTimeoutError

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


class QueryExecutor:
    """
    Executes read-only queries with scoped connection use and a timeout.

    Args:
        engine_provider: Callable returning the engine to borrow connections
                         from. Defaults to the process-wide engine.
        timeout:         Seconds allowed per query. Defaults to
                         settings.query_timeout_seconds, read per call.

    The executor keeps no per-request state, so one instance serves every
    concurrent request.
    """

    def __init__(
        self,
        engine_provider: Callable[[], AsyncEngine] = get_engine,
        timeout: Optional[float] = None,
    ):
        self._engine_provider = engine_provider
        self._timeout = timeout

    @property
    def timeout(self) -> float:
        if self._timeout is not None:
            return self._timeout
        return settings.query_timeout_seconds

    async def fetch_all(
        self,
        sql: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> List[Row]:
        """
        Execute `sql` with `params` bound and return every row.

        Returns:
            Rows in the order the store produced them; [] when nothing matches.

        Raises:
            QueryError: The store could not be reached or rejected the query.
            QueryTimeoutError: The query exceeded the configured timeout.
        """
        timeout = self.timeout
        started = time.perf_counter()
        try:
            rows = await asyncio.wait_for(self._execute(sql, params), timeout=timeout)
        except asyncio.TimeoutError as exc:
            logger.debug("Query timed out after %.2fs: %s", timeout, sql)
            raise QueryTimeoutError(timeout=timeout, context={"sql": sql}) from exc
        except (SQLAlchemyError, OSError) as exc:
            logger.debug("Query failed: %s | %s: %s", sql, type(exc).__name__, exc)
            raise QueryError(cause=exc, context={"sql": sql}) from exc

        logger.debug(
            "Query returned %d rows in %.1fms: %s",
            len(rows),
            (time.perf_counter() - started) * 1000,
            sql,
        )
        return rows

    async def _execute(
        self,
        sql: str,
        params: Optional[Mapping[str, Any]],
    ) -> List[Row]:
        # Leaving the block returns the connection to the pool, including
        # when wait_for cancels this coroutine.
        async with self._engine_provider().connect() as conn:
            result = await conn.execute(text(sql), dict(params or {}))
            return [dict(row._mapping) for row in result]


# Module-level singleton used by the route handlers
query_executor = QueryExecutor()


def get_query_executor() -> QueryExecutor:
    """FastAPI dependency returning the shared executor."""
    return query_executor
