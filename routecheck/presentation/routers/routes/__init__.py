"""Route registry package.

Exports:
    ROUTE_REGISTRY: Declarative list of served routes
    RouteMetadata, HTTPMethod, ErrorSpec: Registry types
    register_routes_from_registry: Turn registry entries into FastAPI routes
"""

from routecheck.presentation.routers.routes.generator import (
    register_routes_from_registry,
)
from routecheck.presentation.routers.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)
from routecheck.presentation.routers.routes.registry import ROUTE_REGISTRY

__all__ = [
    "ROUTE_REGISTRY",
    "ErrorSpec",
    "HTTPMethod",
    "RouteMetadata",
    "register_routes_from_registry",
]
