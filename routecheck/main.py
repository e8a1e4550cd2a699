"""
Main FastAPI application entry point.

create_app() is the single application factory. It is used both for the
served module-level `app` and, through routecheck.testing.fixture_router, for
the per-case fixture routers built by the test harness.

Test mode (Settings.environment == TESTING) suppresses request logging and
debug mode. The RFC 9457 exception handlers are always installed so that a
failing handler yields a problem details body instead of a crash.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from fastapi import APIRouter, FastAPI

from routecheck.core.config import Settings, settings as default_settings
from routecheck.core.container import get_logger
from routecheck.core.errors import MissingDependencyError
from routecheck.presentation.middleware.trace_middleware import TraceMiddleware
from routecheck.presentation.routers.errors import register_exception_handlers
from routecheck.presentation.routers.routes import (
    ROUTE_REGISTRY,
    RouteMetadata,
    register_routes_from_registry,
)


def _verify_dependencies(
    routes: Sequence[RouteMetadata],
    overrides: Mapping[Callable[..., Any], Callable[..., Any]],
) -> None:
    """Ensure every declared route dependency has an override.

    Args:
        routes: Routes about to be registered.
        overrides: Dependency provider -> stub mapping.

    Raises:
        MissingDependencyError: On the first declared dependency without a stub.
    """
    for metadata in routes:
        for dependency in metadata.dependencies:
            if dependency not in overrides:
                raise MissingDependencyError(
                    path=metadata.path,
                    dependency=getattr(dependency, "__name__", repr(dependency)),
                )


def create_app(
    settings: Settings | None = None,
    *,
    routes: Sequence[RouteMetadata] | None = None,
    dependency_overrides: Mapping[Callable[..., Any], Callable[..., Any]] | None = None,
) -> FastAPI:
    """Build a FastAPI application serving the given routes.

    Args:
        settings: Settings the app is built with. Defaults to process settings.
        routes: Route registry entries to serve. Defaults to ROUTE_REGISTRY.
        dependency_overrides: Dependency provider -> stub mapping installed
            into app.dependency_overrides.

    Returns:
        FastAPI: Configured application with no network binding.

    Raises:
        MissingDependencyError: If a route declares a dependency with no override.

    Example:
        >>> app = create_app(Settings(environment=Environment.TESTING))
        >>> [route.path for route in app.routes if route.path == "/users"]
        ['/users']
    """
    app_settings = settings or default_settings
    route_entries = list(ROUTE_REGISTRY if routes is None else routes)
    overrides = dict(dependency_overrides or {})

    _verify_dependencies(route_entries, overrides)

    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.app_version,
        debug=app_settings.debug and not app_settings.is_testing,
    )
    app.state.settings = app_settings
    app.dependency_overrides.update(overrides)

    # Request logging is off in test mode; trace IDs are always assigned
    request_logger = None if app_settings.is_testing else get_logger()
    app.add_middleware(TraceMiddleware, logger=request_logger)

    register_exception_handlers(app)

    router = APIRouter()
    register_routes_from_registry(router, route_entries)
    app.include_router(router)

    return app


app = create_app()
