"""Route generator for the route registry.

Converts declarative RouteMetadata entries into FastAPI routes.

Functions:
    register_routes_from_registry: Generate all routes from registry
    _build_responses: Build OpenAPI responses dict from error specs

Usage:
    from routecheck.presentation.routers.routes.registry import ROUTE_REGISTRY
    from routecheck.presentation.routers.routes.generator import register_routes_from_registry

    router = APIRouter()
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from collections.abc import Sequence
from typing import Any

from fastapi import APIRouter

from routecheck.presentation.routers.routes.metadata import ErrorSpec, RouteMetadata


def register_routes_from_registry(
    router: APIRouter,
    registry: Sequence[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Each entry becomes one router.add_api_route() call. Responses are
    serialized with defaults excluded, so fields holding their default value
    are omitted from the body.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: RouteMetadata entries to convert into routes

    Example:
        >>> from fastapi import APIRouter
        >>> router = APIRouter()
        >>> register_routes_from_registry(router, ROUTE_REGISTRY)
        >>> [route.path for route in router.routes]
        ['/users']
    """
    for metadata in registry:
        responses = _build_responses(metadata.errors) if metadata.errors else None

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),  # Convert Sequence to list for FastAPI
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=responses,
            response_model_exclude_defaults=True,
            deprecated=metadata.deprecated,
        )


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from error specifications.

    Args:
        errors: List of ErrorSpec from RouteMetadata

    Returns:
        Dict mapping status codes to response descriptions for OpenAPI

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="Not found")])
        {404: {'description': 'Not found'}}
    """
    responses: dict[int | str, dict[str, Any]] = {}
    for error in errors:
        entry: dict[str, Any] = {"description": error.description}
        if error.model is not None:
            entry["model"] = error.model
        responses[error.status] = entry
    return responses
