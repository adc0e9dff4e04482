"""
CYF Hotels API — FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn app.main:app).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────┐ ┌──────┐     │
    │  │ Req ID   │→│  Logging    │→│ GZip │→│ CORS │     │
    │  └──────────┘ └─────────────┘ └──────┘ └──────┘     │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────────────┐ ┌───────────┐ ┌─────────┐   │
    │  │ GET hotel tables   │ │ GET /     │ │ /health │   │
    │  └────────────────────┘ └───────────┘ └─────────┘   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ Query→500 │ Timeout→504     │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Create the database connection pool
    3. Log startup complete

    Shutdown:
    1. Dispose the database engine (close all pooled connections)
    2. Log shutdown complete
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.database import dispose_engine, init_engine
from app.exceptions import (
    HotelsApiError,
    ValidationError,
    NotFoundError,
    QueryError,
    QueryTimeoutError,
)
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.middleware.logging import RequestLoggingMiddleware
from app.routes import health, hotels, static
from app.schemas.api import error_body

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    log_format = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Override any existing logging config
    )

    # Third-party libraries that log every operation at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown procedures.

    The connection pool exists exactly for the duration of the application:
    created before the first request, disposed after the last.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("CYF Hotels API starting up...")

    init_engine()

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("CYF Hotels API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError         → 400 Bad Request (client can fix the input)
        NotFoundError           → 404 Not Found
        QueryTimeoutError       → 504 Gateway Timeout
        QueryError              → 500 Internal Server Error
        HotelsApiError (base)   → 500 Internal Server Error

    Unexpected exceptions (anything else) are turned into a 500 by
    RequestIDMiddleware so the response still carries X-Request-ID.

    Exception handlers NEVER put SQL text, driver messages or stack traces in
    the response. Those are logged server-side with the request ID.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content=error_body("validation_error", exc.message, rid, exc.context),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content=error_body("not_found", exc.message, rid),
        )

    @app.exception_handler(QueryTimeoutError)
    async def handle_query_timeout(request: Request, exc: QueryTimeoutError):
        rid = request_id_var.get("")
        logger.error("[%s] Query timeout: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=504,
            content=error_body("query_timeout", exc.message, rid),
        )

    @app.exception_handler(QueryError)
    async def handle_query_error(request: Request, exc: QueryError):
        rid = request_id_var.get("")
        logger.error("[%s] Query error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=error_body("query_error", exc.message, rid),
        )

    @app.exception_handler(HotelsApiError)
    async def handle_app_error(request: Request, exc: HotelsApiError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=error_body("server_error", exc.message, rid),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="CYF Hotels API",
        description=(
            "Read-only JSON access to the CYF hotels database: customers, "
            "reservations, invoices, rooms and room types."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added runs first).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # Collection routes can return every row of a table
    app.add_middleware(GZipMiddleware, minimum_size=500)

    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(hotels.router)
    app.include_router(health.router)
    app.include_router(static.router)

    # Catch-all static mount goes last so API paths match first
    static.mount_static_assets(app)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `app.main:app` to be importable
app = create_app()
