"""Request/response schemas for routed endpoints.

Usage:
    from routecheck.schemas import MockUserResponse
"""

from routecheck.schemas.user_schemas import MockUserResponse

__all__ = ["MockUserResponse"]
