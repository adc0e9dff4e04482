"""
CYF Hotels API — Connection Pool Lifecycle
============================================

What:  Owns the single process-wide async SQLAlchemy engine (and its pool).
How:   init_engine() creates the engine once during application startup,
       get_engine() hands it to whoever needs a connection, and
       dispose_engine() closes every pooled connection at shutdown.
Who:   The application lifespan (main.py), the query executor and the
       health check.

Connection Pooling Strategy:
    pool_size / max_overflow:  From settings (PostgreSQL only)
    pool_pre_ping:             Validates connections before use
    pool_recycle=3600:         Recycles connections every hour

    Each query borrows one connection with `async with engine.connect()`;
    nothing else in the process holds a connection between requests.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.config import settings
from app.exceptions import QueryError

logger = logging.getLogger(__name__)

# ── Engine Holder ─────────────────────────────────────────────────────────
# None until init_engine() runs; back to None after dispose_engine().
_engine: Optional[AsyncEngine] = None


def _engine_options(url: str) -> Dict[str, Any]:
    """
    Build create_async_engine() keyword arguments for the given URL.

    SQLite dialects choose their own pool class (static or null pool), which
    reject the queue-pool sizing arguments.
    """
    options: Dict[str, Any] = {
        "pool_pre_ping": settings.db_pool_pre_ping,
        "pool_recycle": 3600,
        # Echo SQL queries in DEBUG mode for development visibility
        "echo": settings.log_level == "DEBUG",
    }
    if make_url(url).get_backend_name() != "sqlite":
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    return options


def init_engine(url: Optional[str] = None) -> AsyncEngine:
    """
    Create the process-wide engine.

    Calling it again while an engine exists returns the existing engine;
    dispose_engine() first to switch databases.
    """
    global _engine
    if _engine is not None:
        return _engine

    url = url or settings.database_url
    _engine = create_async_engine(url, **_engine_options(url))
    logger.info("Database pool created for %s", make_url(url).render_as_string(hide_password=True))
    return _engine


def get_engine() -> AsyncEngine:
    """
    Return the process-wide engine.

    Raises:
        QueryError: The pool has not been initialized (or was disposed).
    """
    if _engine is None:
        raise QueryError(
            message="The database is not available.",
            context={"reason": "connection pool is not initialized"},
        )
    return _engine


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler) and by tests.
    """
    global _engine
    if _engine is None:
        return
    engine, _engine = _engine, None
    await engine.dispose()
    logger.info("Database pool disposed")
