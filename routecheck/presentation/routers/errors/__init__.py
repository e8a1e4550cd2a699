"""RFC 9457 error response schemas and exception handlers.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from routecheck.presentation.routers.errors.exception_handlers import (
    register_exception_handlers,
)
from routecheck.presentation.routers.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ProblemDetails",
    "register_exception_handlers",
]
