"""
CYF Hotels API — Static Entry Page
====================================

What:  Serves the single-page entry point at `/` and, when the directory
       exists, every other file under STATIC_ROOT as a static asset.
How:   GET / returns STATIC_ROOT/index.html through FileResponse.
       mount_static_assets() mounts Starlette's StaticFiles at the root; it
       must be called after the API routers are included so their paths
       are matched first.
"""

import logging
from pathlib import Path

from fastapi import APIRouter, FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from app.config import settings
from app.exceptions import NotFoundError
from app.schemas.api import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Static"])

INDEX_FILE = "index.html"


@router.get(
    "/",
    summary="Static entry page",
    response_class=FileResponse,
    responses={404: {"description": "Entry page missing", "model": ErrorResponse}},
    include_in_schema=False,
)
async def index() -> FileResponse:
    """Return STATIC_ROOT/index.html."""
    index_path = Path(settings.static_root).resolve() / INDEX_FILE
    if not index_path.is_file():
        raise NotFoundError(resource="file", resource_id=INDEX_FILE)
    return FileResponse(path=str(index_path), media_type="text/html")


def mount_static_assets(app: FastAPI) -> None:
    """Serve STATIC_ROOT at `/` if it exists; otherwise skip with a warning."""
    static_root = Path(settings.static_root).resolve()
    if not static_root.is_dir():
        logger.warning("Static directory %s not found; static assets disabled", static_root)
        return
    app.mount("/", StaticFiles(directory=str(static_root)), name="static")
