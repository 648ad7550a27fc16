"""Result types for railway-oriented programming.

Handlers, the request validator and the translation helpers all return
``Result`` values instead of raising, so the dispatcher can treat "handler
succeeded" and "handler failed" as two branches of one value.

Usage:
    def find_space(guid: str) -> Result[SpaceRecord, ApiError]:
        if guid not in spaces:
            return Failure(error=not_found_error(None, "Space"))
        return Success(value=spaces[guid])

    match find_space("abc"):
        case Success(value=space):
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
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: The error that occurred (an ApiError, a WrappedError or an
            exception).
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
