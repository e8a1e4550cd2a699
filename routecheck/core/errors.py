"""Harness exceptions.

Only conditions that make a test case meaningless are raised. Everything the
system under test gets wrong (status, body, decoding) is recorded on the
RouteOutcome instead.

Hierarchy:
    RouteCheckError
    ├── RouteCaseError           malformed case or request construction
    └── MissingDependencyError   fixture router built without a required stub
"""


class RouteCheckError(Exception):
    """Base class for all harness errors."""


class RouteCaseError(RouteCheckError):
    """Raised when a RouteCase cannot be executed at all.

    Covers invariant violations at construction (want/want_error both set or
    both unset) and failures building the synthetic request.
    """


class MissingDependencyError(RouteCheckError):
    """Raised when a route requires a dependency with no stub supplied.

    Attributes:
        path: Path of the route declaring the dependency.
        dependency: Name of the missing dependency provider.
    """

    def __init__(self, *, path: str, dependency: str) -> None:
        self.path = path
        self.dependency = dependency
        super().__init__(
            f"Route '{path}' requires dependency '{dependency}' "
            "but no override was supplied to the fixture router"
        )
