"""Route Registry - Single Source of Truth for served routes.

Usage:
    from routecheck.presentation.routers.routes.registry import ROUTE_REGISTRY
"""

from routecheck.presentation.routers.errors.problem_details import ProblemDetails
from routecheck.presentation.routers.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)
from routecheck.presentation.routers.users import list_users
from routecheck.schemas.user_schemas import MockUserResponse

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Users
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users",
        handler=list_users,
        tags=["Users"],
        summary="List users",
        description="Return the mocked users payload.",
        operation_id="list_users",
        response_model=MockUserResponse,
        status_code=200,
        errors=[
            ErrorSpec(
                status=500,
                description="Unexpected handler failure",
                model=ProblemDetails,
            ),
        ],
    ),
]
