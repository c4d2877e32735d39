"""Create user command."""

import logging
from dataclasses import dataclass

from application.user.results import UserResult
from domain.user.core.entities.user import User, UserCandidate
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.validation import validate_user

logger = logging.getLogger(__name__)


@dataclass
class CreateUserCommand:
    """Command to create a new user.

    Validates the candidate, then lets the repository assign the id.

    Examples:
        >>> command = CreateUserCommand(repository)
        >>> result = await command.execute(UserCandidate("ada", "ada@example.com"))
        >>> result.value.id
        1
    """

    repository: IUserRepository

    async def execute(self, candidate: UserCandidate) -> UserResult[User]:
        """Execute create command.

        Args:
            candidate: Username/email submitted by the client

        Returns:
            CREATED with the stored user, or INVALID with the first
            validation message
        """
        error = validate_user(candidate)
        if error is not None:
            return UserResult.invalid(error)

        # validate_user guarantees both fields are set
        user = await self.repository.create(
            username=candidate.username or "",
            email=candidate.email or "",
        )
        logger.info("user.created", extra={"user_id": user.id})
        return UserResult.created(user)
