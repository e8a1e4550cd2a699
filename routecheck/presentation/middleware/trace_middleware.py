"""Trace middleware to inject a trace_id per request.

- Adds X-Trace-Id response header (echoes the request header when present)
- Stores the trace ID on request.state for exception handlers
- Optionally logs one request_completed event per request; fixture routers
  built in test mode leave request logging off
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Awaitable, Callable
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

if TYPE_CHECKING:
    from routecheck.domain.protocols.logger_protocol import LoggerProtocol

TRACE_HEADER = "X-Trace-Id"


class TraceMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that assigns a trace ID to each request.

    Args:
        app: Wrapped ASGI application.
        logger: Logger for request_completed events. None disables request logging.
    """

    def __init__(self, app: ASGIApp, logger: LoggerProtocol | None = None) -> None:
        super().__init__(app)
        self._logger = logger

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Intercept a request to set and propagate a trace ID.

        Args:
            request (Request): Incoming request.
            call_next (Callable[[Request], Awaitable[Response]]): Next handler.

        Returns:
            Response: Response with X-Trace-Id header added.
        """
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid4())
        request.state.trace_id = trace_id
        started = time.perf_counter()
        response = await call_next(request)
        response.headers[TRACE_HEADER] = trace_id
        if self._logger is not None:
            self._logger.info(
                "request_completed",
                trace_id=trace_id,
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 3),
            )
        return response
