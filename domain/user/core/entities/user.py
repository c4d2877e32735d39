"""User entity and inbound candidate record."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """User record held by the repository.

    Invariants:
    - id is assigned by the repository on creation and never changes
    - username and email passed validation when last written

    Examples:
        >>> user = User(id=1, username="ada", email="ada@example.com")
        >>> user.rename("ada.l", "ada.l@example.com")
        >>> user.username
        'ada.l'
    """

    id: int
    username: str
    email: str

    def rename(self, username: str, email: str) -> None:
        """Replace username and email in place. The id is left untouched."""
        self.username = username
        self.email = email


@dataclass(frozen=True)
class UserCandidate:
    """Username/email pair submitted by a client for create or update.

    Missing fields are kept as None and rejected by validation.
    """

    username: Optional[str] = None
    email: Optional[str] = None
