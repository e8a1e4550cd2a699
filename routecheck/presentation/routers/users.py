"""Users router handlers.

Mocked users endpoint served by fixture routers. The handler holds no
state and has no dependencies: every call returns the same payload.
"""

from routecheck.schemas.user_schemas import MockUserResponse

MOCK_USERS_MESSAGE = "mock response"


async def list_users() -> MockUserResponse:
    """List users.

    GET /users -> 200 OK

    Returns:
        MockUserResponse: Fixed mock payload.
    """
    return MockUserResponse(users=MOCK_USERS_MESSAGE)
