"""Delete user command."""

import logging
from dataclasses import dataclass

from application.user.results import UserResult
from domain.user.core.ports.user_repository import IUserRepository

logger = logging.getLogger(__name__)


@dataclass
class DeleteUserCommand:
    """Command to remove a user. No soft delete, no history."""

    repository: IUserRepository

    async def execute(self, user_id: int) -> UserResult[None]:
        """Execute delete command.

        Args:
            user_id: Id of the user to remove

        Returns:
            DELETED, or NOT_FOUND if no record has that id
        """
        if not await self.repository.delete(user_id):
            return UserResult.not_found(user_id)

        logger.info("user.deleted", extra={"user_id": user_id})
        return UserResult.deleted()
