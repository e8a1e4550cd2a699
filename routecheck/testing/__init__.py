"""Route contract-test harness.

Exports:
    RouteCase: Declarative description of one HTTP interaction
    RouteOutcome: Observed response and recorded failures
    RouteExerciseRunner: Executes cases against isolated fixture routers
    run_route_case: Run a case and assert it passed
    build_fixture_router: Build a fresh test-mode application
    structural_diff: Field-by-field -want +got diff
"""

from routecheck.testing.diff import structural_diff
from routecheck.testing.fixture_router import FixtureBuilder, build_fixture_router
from routecheck.testing.route_case import RouteCase, RouteOutcome
from routecheck.testing.runner import RouteExerciseRunner, run_route_case

__all__ = [
    "FixtureBuilder",
    "RouteCase",
    "RouteExerciseRunner",
    "RouteOutcome",
    "build_fixture_router",
    "run_route_case",
    "structural_diff",
]
