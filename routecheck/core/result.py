"""Result types for railway-oriented programming.

Recoverable outcomes (body decoding, reads) flow through the runner as data
instead of exceptions, so every failure of a case can be reported.

Usage:
    def decode(raw: bytes) -> Result[MockUserResponse, str]:
        try:
            return Success(value=MockUserResponse.model_validate_json(raw))
        except ValidationError as exc:
            return Failure(error=str(exc))

    match decode(raw):
        case Success(value=value):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result = Success[T] | Failure[E]
