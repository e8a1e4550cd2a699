"""API tests for RFC 9457 error responses of fixture routers.

Tests cover:
- 404 for unregistered paths (router-level)
- 405 for a registered path with the wrong method
- 422 for request validation failures
- 500 for handlers that raise
- Generic problem type for statuses without a dedicated title

Architecture:
- Error cases are declared with want_error=True; the runner decodes them
  into ProblemDetails and never into the success model
"""

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient
from pydantic import BaseModel

from routecheck.presentation.routers.errors.problem_details import ProblemDetails
from routecheck.presentation.routers.routes.metadata import HTTPMethod, RouteMetadata
from routecheck.testing import RouteCase, build_fixture_router, run_route_case


class ItemsResponse(BaseModel):
    limit: int = 0


async def _list_items(limit: int) -> ItemsResponse:
    return ItemsResponse(limit=limit)


async def _explode() -> ItemsResponse:
    raise RuntimeError("handler blew up")


ITEMS_ROUTE = RouteMetadata(
    method=HTTPMethod.GET,
    path="/items",
    handler=_list_items,
    tags=["Items"],
    summary="List items",
    operation_id="list_items",
    response_model=ItemsResponse,
)

EXPLODING_ROUTE = RouteMetadata(
    method=HTTPMethod.GET,
    path="/explode",
    handler=_explode,
    tags=["Items"],
    summary="Always fails",
    operation_id="explode",
    response_model=ItemsResponse,
)


@pytest.mark.api
class TestNotFound:
    """Requests to unregistered paths."""

    def test_unregistered_path_returns_problem_details(self, test_settings, mock_logger):
        """GET on an unknown path should yield 404 decoded as ProblemDetails."""
        outcome = run_route_case(
            RouteCase(
                method=HTTPMethod.GET,
                path="/accounts",
                want_status=404,
                want_error=True,
                want_problem={
                    "type": "https://routecheck.test/errors/not-found",
                    "title": "Resource Not Found",
                    "status": 404,
                    "instance": "/accounts",
                },
            ),
            settings=test_settings,
            logger=mock_logger,
        )

        assert isinstance(outcome.got, ProblemDetails)
        assert outcome.got.detail == "Not Found"

    def test_problem_includes_trace_id(self, client: TestClient):
        """Problem body should carry the request trace ID."""
        response = client.get("/accounts", headers={"X-Trace-Id": "trace-404"})

        assert response.status_code == 404
        data = response.json()
        assert data["trace_id"] == "trace-404"
        assert "errors" not in data


@pytest.mark.api
class TestMethodNotAllowed:
    """Registered path, unregistered method."""

    def test_post_users_returns_405(self, client: TestClient):
        """POST /users should yield 405 with an Allow header."""
        response = client.post("/users", content=b"{}")

        assert response.status_code == 405
        assert "GET" in response.headers["allow"]
        data = response.json()
        assert data["title"] == "Method Not Allowed"
        assert data["status"] == 405
        assert data["instance"] == "/users"

    def test_post_users_via_runner(self, test_settings, mock_logger):
        """Runner error branch should accept the 405 problem body."""
        outcome = run_route_case(
            RouteCase(
                method="POST",
                path="/users",
                body=b'{"users": "x"}',
                headers={"Content-Type": "application/json"},
                want_status=405,
                want_error=True,
                want_problem={"title": "Method Not Allowed"},
            ),
            settings=test_settings,
            logger=mock_logger,
        )

        assert outcome.got.status == 405


@pytest.mark.api
class TestValidationFailed:
    """Request validation failures."""

    def test_invalid_query_parameter_returns_field_errors(self, test_settings):
        """Non-integer limit should yield 422 with a field-level error."""
        app = build_fixture_router(test_settings, routes=[ITEMS_ROUTE])

        with TestClient(app) as test_client:
            response = test_client.get("/items", params={"limit": "many"})

        assert response.status_code == 422
        data = response.json()
        assert data["type"] == "https://routecheck.test/errors/validation-failed"
        assert data["title"] == "Validation Failed"
        assert data["errors"][0]["field"] == "query.limit"

    def test_valid_query_parameter_passes(self, test_settings, mock_logger):
        """Valid limit should decode into the typed output slot."""
        run_route_case(
            RouteCase(
                method=HTTPMethod.GET,
                path="/items?limit=5",
                want_status=200,
                want=ItemsResponse(limit=5),
            ),
            settings=test_settings,
            routes=[ITEMS_ROUTE],
            logger=mock_logger,
        )


@pytest.mark.api
class TestInternalServerError:
    """Handlers that raise are recovered into 500 problem bodies."""

    def test_raising_handler_returns_500_problem(self, test_settings, mock_logger):
        """Unhandled handler exception should yield a 500 problem body."""
        outcome = run_route_case(
            RouteCase(
                method=HTTPMethod.GET,
                path="/explode",
                want_status=500,
                want_error=True,
                want_problem={"title": "Internal Server Error", "status": 500},
            ),
            settings=test_settings,
            routes=[EXPLODING_ROUTE],
            logger=mock_logger,
        )

        assert "handler blew up" not in outcome.body.decode()


async def _teapot() -> ItemsResponse:
    raise HTTPException(status_code=418, detail="short and stout")


TEAPOT_ROUTE = RouteMetadata(
    method=HTTPMethod.GET,
    path="/teapot",
    handler=_teapot,
    tags=["Items"],
    summary="Raises an unmapped status",
    operation_id="teapot",
    response_model=ItemsResponse,
)


@pytest.mark.api
class TestUnmappedStatus:
    """Statuses outside the title table use the generic problem type."""

    def test_unmapped_status_uses_generic_title(self, test_settings, mock_logger):
        run_route_case(
            RouteCase(
                method=HTTPMethod.GET,
                path="/teapot",
                want_status=418,
                want_error=True,
                want_problem={
                    "type": "https://routecheck.test/errors/error",
                    "title": "Error",
                    "status": 418,
                    "detail": "short and stout",
                },
            ),
            settings=test_settings,
            routes=[TEAPOT_ROUTE],
            logger=mock_logger,
        )
