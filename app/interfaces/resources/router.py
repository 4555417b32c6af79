"""
FastAPI routers for keyed vehicle resources.

All routes delegate to ResourceHandler. No business logic here.
Path parameters and bodies are taken raw so that validation, and the
400 it produces, stays in the application layer.
Error mapping is handled by centralized error handlers.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse, Response

from app.application.resources.handler import HandlerResult, ResourceHandler
from app.interfaces.resources.dependencies import resource_handler_dependency
from app.interfaces.schemas import CreatedResponse, ErrorResponse, ResourceBody

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    429: {"description": "Rate limit exceeded"},
    500: {"model": ErrorResponse},
}


def _render(result: HandlerResult) -> Response:
    if result.body is None:
        return Response(status_code=result.status_code)
    return JSONResponse(status_code=result.status_code, content=result.body)


def build_resource_router(resource_name: str) -> APIRouter:
    """Build the CRUD router for one resource type, mounted at /<resource_name>.

    Args:
        resource_name: Resource type, e.g. "bicycle".

    Returns:
        An APIRouter exposing read, create, update, upsert and delete.
    """
    router = APIRouter(prefix=f"/{resource_name}", tags=[resource_name])
    get_handler = resource_handler_dependency(resource_name)

    @router.get(
        "/{resource_id}",
        response_model=ResourceBody,
        responses=ERROR_RESPONSES,
        summary=f"Read a {resource_name}",
    )
    def read_resource(
        resource_id: str,
        handler: ResourceHandler = Depends(get_handler),
    ) -> Response:
        return _render(handler.read(resource_id))

    @router.post(
        "/",
        status_code=201,
        response_model=CreatedResponse,
        responses=ERROR_RESPONSES,
        summary=f"Create a {resource_name} with a generated id",
    )
    @router.post("", status_code=201, include_in_schema=False)
    def create_resource(
        body: Any = Body(default=None),
        handler: ResourceHandler = Depends(get_handler),
    ) -> Response:
        return _render(handler.create(body))

    @router.post(
        "/{resource_id}/update",
        status_code=204,
        responses=ERROR_RESPONSES,
        summary=f"Update an existing {resource_name}",
    )
    def update_resource(
        resource_id: str,
        body: Any = Body(default=None),
        handler: ResourceHandler = Depends(get_handler),
    ) -> Response:
        return _render(handler.update(resource_id, body))

    @router.put(
        "/{resource_id}",
        status_code=204,
        responses={201: {"model": CreatedResponse}, **ERROR_RESPONSES},
        summary=f"Update a {resource_name}, creating it if absent",
    )
    def upsert_resource(
        resource_id: str,
        body: Any = Body(default=None),
        handler: ResourceHandler = Depends(get_handler),
    ) -> Response:
        return _render(handler.upsert(resource_id, body))

    @router.delete(
        "/{resource_id}",
        status_code=204,
        responses=ERROR_RESPONSES,
        summary=f"Delete a {resource_name}",
    )
    def delete_resource(
        resource_id: str,
        handler: ResourceHandler = Depends(get_handler),
    ) -> Response:
        return _render(handler.delete(resource_id))

    return router
