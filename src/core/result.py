"""Result types for railway-oriented programming.

Operations that can fail for business reasons (bad credentials, a consumed
one-time code, a reused password) return a Result instead of raising. The
failure path is part of the signature and callers must handle it.

Usage:
    result = await token_service.consume(email, code, purpose)
    match result:
        case Success():
            ...
        case Failure(error=error):
            logger.warning("consume_rejected", reason=error.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

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
        error: The error describing why the operation failed.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
