"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.user.core.entities.user import User


class IUserRepository(ABC):
    """User repository interface.

    Abstracts storage of user records so handlers never touch the
    underlying collection. Implementations must serialize mutations:
    two concurrent creates may never receive the same id.

    All methods return copies; mutating a returned User does not change
    the stored record.
    """

    @abstractmethod
    async def list(self, skip: int = 0, take: Optional[int] = None) -> List[User]:
        """List users in insertion order.

        Args:
            skip: Number of records to skip (negative values count as 0)
            take: Maximum number of records to return (None = all remaining)

        Returns:
            Snapshot of the requested slice, possibly empty
        """
        pass

    @abstractmethod
    async def get(self, user_id: int) -> Optional[User]:
        """Find user by id.

        Args:
            user_id: User id

        Returns:
            User or None if not found
        """
        pass

    @abstractmethod
    async def create(self, username: str, email: str) -> User:
        """Store a new user and assign its id.

        The new id is one greater than the current maximum id, or 1 when
        the repository is empty.

        Args:
            username: Validated username
            email: Validated email

        Returns:
            The created user
        """
        pass

    @abstractmethod
    async def update(self, user_id: int, username: str, email: str) -> Optional[User]:
        """Replace username and email of an existing user.

        Args:
            user_id: User id
            username: Validated username
            email: Validated email

        Returns:
            Updated user or None if not found
        """
        pass

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        """Delete user by id.

        Args:
            user_id: User id

        Returns:
            True if a record was removed, False if none matched
        """
        pass
