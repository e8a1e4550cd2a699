"""Pytest configuration for the route contract-test harness.

This configuration ensures:
1. The process settings load in testing mode (JSON logs, no request logging)
2. Every test gets a fresh fixture router (no state shared between tests)
3. Custom markers are registered
"""

import os

# Must be set before any routecheck import builds the module-level settings
os.environ.setdefault("ENVIRONMENT", "testing")

from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from routecheck.core.config import Settings  # noqa: E402
from routecheck.core.enums import Environment  # noqa: E402
from routecheck.testing import RouteExerciseRunner, build_fixture_router  # noqa: E402


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with isolated components")
    config.addinivalue_line(
        "markers", "api: Full request/response cycle through a fixture router"
    )


@pytest.fixture
def test_settings() -> Settings:
    """Explicit test-mode settings (never read from the process environment)."""
    return Settings(
        environment=Environment.TESTING,
        api_base_url="https://routecheck.test/",
    )


@pytest.fixture
def fixture_app(test_settings: Settings) -> FastAPI:
    """Fresh fixture router serving ROUTE_REGISTRY."""
    return build_fixture_router(test_settings)


@pytest.fixture
def client(fixture_app: FastAPI):
    """TestClient bound to the fresh fixture router."""
    with TestClient(fixture_app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; bind() returns the same double so calls are observable."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def runner(test_settings: Settings, mock_logger: MagicMock) -> RouteExerciseRunner:
    """Runner over ROUTE_REGISTRY with an observable logger."""
    return RouteExerciseRunner(settings=test_settings, logger=mock_logger)
