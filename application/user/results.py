"""Explicit outcomes returned by user commands and queries."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from domain.user.core.messages import user_not_found_message

T = TypeVar("T")


class Outcome(Enum):
    """Kind of result produced by a handler."""

    OK = "ok"
    CREATED = "created"
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    INVALID = "invalid"


@dataclass(frozen=True)
class UserResult(Generic[T]):
    """Result of a user operation.

    Handlers report not-found and validation failures as values instead of
    raising, the HTTP adapter maps the outcome to a status code.

    Examples:
        >>> UserResult.not_found(7).error
        'User with ID 7 not found.'
        >>> UserResult.invalid("invalid email format.").is_success
        False
    """

    outcome: Outcome
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "UserResult[T]":
        return cls(Outcome.OK, value=value)

    @classmethod
    def created(cls, value: T) -> "UserResult[T]":
        return cls(Outcome.CREATED, value=value)

    @classmethod
    def deleted(cls) -> "UserResult[T]":
        return cls(Outcome.DELETED)

    @classmethod
    def not_found(cls, user_id: int) -> "UserResult[T]":
        return cls(Outcome.NOT_FOUND, error=user_not_found_message(user_id))

    @classmethod
    def invalid(cls, reason: str) -> "UserResult[T]":
        return cls(Outcome.INVALID, error=reason)

    @property
    def is_success(self) -> bool:
        return self.outcome in (Outcome.OK, Outcome.CREATED, Outcome.DELETED)
