"""
CYF Hotels API — Hotel Data Route Handlers
============================================

What:  One GET route per entry of the route table (app/queries.py).
How:   register_routes() builds a handler for each RouteDefinition:
       collection routes run their query as-is; item routes validate the
       path parameter, bind it and run the filtered query. Every handler
       returns the rows through the response formatter.
Who:   Called by the frontend page and any HTTP client.

Responses:
    200  JSON array of row objects ([] when nothing matches)
    400  Invalid path parameter (item routes only)
    500  Query failed (connectivity, SQL error)
    504  Query timed out
"""

import logging
from typing import Any, Callable, Coroutine, Iterable

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.queries import ROUTE_TABLE, RouteDefinition
from app.schemas.api import ErrorResponse
from app.services.query_executor import QueryExecutor, get_query_executor
from app.services.response_formatter import format_rows

logger = logging.getLogger(__name__)

Endpoint = Callable[..., Coroutine[Any, Any, JSONResponse]]

_ERROR_RESPONSES = {
    500: {"description": "Query failed", "model": ErrorResponse},
    504: {"description": "Query timed out", "model": ErrorResponse},
}


def _collection_endpoint(definition: RouteDefinition) -> Endpoint:
    async def endpoint(
        executor: QueryExecutor = Depends(get_query_executor),
    ) -> JSONResponse:
        rows = await executor.fetch_all(definition.sql)
        return format_rows(rows)

    return endpoint


def _item_endpoint(definition: RouteDefinition) -> Endpoint:
    async def endpoint(
        request: Request,
        executor: QueryExecutor = Depends(get_query_executor),
    ) -> JSONResponse:
        params = definition.bind(request.path_params.get(definition.param_name))
        rows = await executor.fetch_all(definition.sql, params)
        return format_rows(rows)

    return endpoint


def _path_parameter_doc(definition: RouteDefinition) -> dict:
    """OpenAPI parameter entry for a handler that reads request.path_params."""
    return {
        "parameters": [
            {
                "name": definition.param_name,
                "in": "path",
                "required": True,
                "schema": {"type": "integer", "format": "int32"},
            }
        ]
    }


def register_routes(router: APIRouter, definitions: Iterable[RouteDefinition]) -> APIRouter:
    """Add a GET route to `router` for every definition."""
    for definition in definitions:
        responses = dict(_ERROR_RESPONSES)
        openapi_extra = None
        if definition.is_item:
            endpoint = _item_endpoint(definition)
            responses[400] = {"description": "Invalid path parameter", "model": ErrorResponse}
            openapi_extra = _path_parameter_doc(definition)
        else:
            endpoint = _collection_endpoint(definition)

        router.add_api_route(
            definition.path,
            endpoint,
            methods=["GET"],
            name=definition.name,
            summary=definition.summary,
            responses=responses,
            openapi_extra=openapi_extra,
        )
        logger.debug("Registered GET %s", definition.path)
    return router


router = register_routes(APIRouter(tags=["Hotel"]), ROUTE_TABLE)
