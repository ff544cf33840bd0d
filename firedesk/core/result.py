"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising, which keeps the
failure path explicit at every call site (audit recording, log queries).

Usage:
    def find_action(name: str) -> Result[str, AuditError]:
        if not name:
            return Failure(error=AuditError(...))
        return Success(value=action_id)

    match find_action("EKLE"):
        case Success(value=action_id):
            ...
        case Failure(error=error):
            logger.error("lookup failed", error_message=error.message)
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


type Result[T, E] = Success[T] | Failure[E]
