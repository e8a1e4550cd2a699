"""User endpoint schemas.

Response shapes served by the mocked users route. Routes are generated with
defaults excluded from the body (omit-if-empty): a field holding its default
is left out of the JSON entirely, and decoding the body back restores the
default.
"""

from pydantic import BaseModel, Field


class MockUserResponse(BaseModel):
    """Fixed payload returned by GET /users.

    Attributes:
        users: Mock users message. Omitted from the body when empty.
    """

    users: str = Field("", description="Mock users message")
