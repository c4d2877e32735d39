"""Get user query."""

from dataclasses import dataclass

from application.user.results import UserResult
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class GetUserQuery:
    """Query to get a single user by id.

    Examples:
        >>> query = GetUserQuery(repository)
        >>> result = await query.execute(1)
    """

    repository: IUserRepository

    async def execute(self, user_id: int) -> UserResult[User]:
        user = await self.repository.get(user_id)
        if user is None:
            return UserResult.not_found(user_id)
        return UserResult.ok(user)
