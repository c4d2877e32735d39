"""Update user command."""

import logging
from dataclasses import dataclass

from application.user.results import UserResult
from domain.user.core.entities.user import User, UserCandidate
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.validation import validate_user

logger = logging.getLogger(__name__)


@dataclass
class UpdateUserCommand:
    """Command to replace username and email of an existing user.

    The lookup happens before validation, so an unknown id is reported as
    NOT_FOUND even when the candidate is also invalid.
    """

    repository: IUserRepository

    async def execute(self, user_id: int, candidate: UserCandidate) -> UserResult[User]:
        """Execute update command.

        Args:
            user_id: Id of the user to update
            candidate: New username/email

        Returns:
            OK with the updated user, NOT_FOUND or INVALID
        """
        if await self.repository.get(user_id) is None:
            return UserResult.not_found(user_id)

        error = validate_user(candidate)
        if error is not None:
            return UserResult.invalid(error)

        user = await self.repository.update(
            user_id,
            username=candidate.username or "",
            email=candidate.email or "",
        )
        # Deleted between lookup and update
        if user is None:
            return UserResult.not_found(user_id)

        logger.info("user.updated", extra={"user_id": user_id})
        return UserResult.ok(user)
