"""List users query."""

from dataclasses import dataclass
from typing import List, Optional

from application.user.results import UserResult
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class ListUsersQuery:
    """Query returning a page of users in insertion order.

    Out-of-range paging yields a partial or empty page, never an error.

    Examples:
        >>> query = ListUsersQuery(repository)
        >>> result = await query.execute(skip=2, take=1)
    """

    repository: IUserRepository

    async def execute(self, skip: int = 0, take: Optional[int] = None) -> UserResult[List[User]]:
        """Execute list query.

        Args:
            skip: Records to skip (default 0)
            take: Records to return (default: everything after skip)

        Returns:
            OK with the requested page
        """
        users = await self.repository.list(skip=skip, take=take)
        return UserResult.ok(users)
