"""In-memory User Repository."""

import threading
from dataclasses import replace
from typing import Iterable, List, Optional

from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository.

    Stores users in a list kept in insertion order. Every access goes
    through a single lock, so id assignment and removals never interleave
    with other requests. Nothing is awaited while the lock is held.

    Records are copied on the way in and out; callers never hold a
    reference to the stored objects.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> user = await repo.create("ada", "ada@example.com")
        >>> user.id
        1
        >>> found = await repo.get(1)
    """

    def __init__(self, users: Optional[Iterable[User]] = None) -> None:
        """Initialize storage.

        Args:
            users: Optional seed records, kept in the given order
        """
        self._users: List[User] = [replace(u) for u in users or ()]
        self._lock = threading.Lock()

    async def list(self, skip: int = 0, take: Optional[int] = None) -> List[User]:
        """List users in insertion order.

        Args:
            skip: Records to skip, negative values count as 0
            take: Records to return, None means all remaining

        Returns:
            Copies of the requested slice
        """
        start = max(skip, 0)
        with self._lock:
            count = len(self._users) if take is None else take
            if count <= 0:
                return []
            return [replace(u) for u in self._users[start : start + count]]

    async def get(self, user_id: int) -> Optional[User]:
        """Find user by id.

        Args:
            user_id: User id

        Returns:
            Copy of the user or None if not found
        """
        with self._lock:
            user = self._find(user_id)
            return replace(user) if user is not None else None

    async def create(self, username: str, email: str) -> User:
        """Append a user with id = max(existing ids) + 1, or 1 if empty.

        Args:
            username: Validated username
            email: Validated email

        Returns:
            Copy of the created user
        """
        with self._lock:
            next_id = max((u.id for u in self._users), default=0) + 1
            user = User(id=next_id, username=username, email=email)
            self._users.append(user)
            return replace(user)

    async def update(self, user_id: int, username: str, email: str) -> Optional[User]:
        """Rename an existing user in place.

        Args:
            user_id: User id
            username: Validated username
            email: Validated email

        Returns:
            Copy of the updated user or None if not found
        """
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return None
            user.rename(username, email)
            return replace(user)

    async def delete(self, user_id: int) -> bool:
        """Delete user by id.

        Args:
            user_id: User id

        Returns:
            True if the user was removed, False if none matched
        """
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return False
            self._users.remove(user)
            return True

    def _find(self, user_id: int) -> Optional[User]:
        # Caller holds the lock
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        with self._lock:
            self._users.clear()

    def count(self) -> int:
        """Get total number of users in memory.

        Returns:
            Number of users stored
        """
        with self._lock:
            return len(self._users)
