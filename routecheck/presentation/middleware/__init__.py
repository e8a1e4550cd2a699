"""HTTP middleware."""

from routecheck.presentation.middleware.trace_middleware import TraceMiddleware

__all__ = ["TraceMiddleware"]
