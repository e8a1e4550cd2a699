"""Route metadata types for the route registry.

The registry is the single source of truth for the routes a fixture router
serves. Each entry is declarative; the generator turns entries into FastAPI
routes and the fixture builder reads the declared dependencies to fail fast
when a stub is missing.

Core types:
    RouteMetadata: Complete route specification (method, path, handler, dependencies, etc.)
    HTTPMethod: HTTP method enum
    ErrorSpec: Error response specification for OpenAPI

Usage:
    from routecheck.presentation.routers.routes.metadata import HTTPMethod, RouteMetadata

    metadata = RouteMetadata(
        method=HTTPMethod.GET,
        path="/users",
        handler=list_users,
        tags=["Users"],
        summary="List users",
        operation_id="list_users",
        response_model=MockUserResponse,
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel


# =============================================================================
# HTTP Method Enum
# =============================================================================


class HTTPMethod(str, Enum):
    """HTTP methods for routes and route cases.

    Attributes:
        GET: Safe, idempotent read operations
        POST: Non-idempotent create operations
        PUT: Idempotent complete replacement
        PATCH: Non-idempotent partial update
        DELETE: Idempotent delete operations
        HEAD: GET without a response body
        OPTIONS: Capability discovery
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


# =============================================================================
# Error Specification
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code (e.g., 400, 404, 500)
        description: Human-readable error description
        model: Optional Pydantic model for response (defaults to ProblemDetails)

    Examples:
        >>> ErrorSpec(status=404, description="User not found")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


# =============================================================================
# Route Metadata (SSOT)
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for a route (Single Source of Truth).

    Identity fields:
        method: HTTP method (GET, POST, etc.)
        path: URL path with placeholders (e.g., "/users/{user_id}")
        handler: Async function that implements the endpoint

    OpenAPI documentation:
        tags: OpenAPI tags (e.g., ["Users"])
        summary: Short endpoint description
        description: Detailed endpoint description
        operation_id: Stable operation ID for client generation

    Request/Response:
        response_model: Pydantic model for success response
        status_code: Expected success status (e.g., 200, 201, 204)
        errors: List of possible error responses for OpenAPI

    Wiring:
        dependencies: Dependency providers the handler resolves via Depends().
            A fixture router must be given an override for each of them.

    Deprecation:
        deprecated: Whether endpoint is deprecated
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # OpenAPI documentation
    tags: Sequence[str]
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Wiring
    dependencies: Sequence[Callable[..., Any]] = field(default_factory=tuple)

    # Deprecation
    deprecated: bool = False
