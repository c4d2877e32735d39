"""Tests for create, update and delete user commands."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from application.user.commands.create_user import CreateUserCommand
from application.user.commands.delete_user import DeleteUserCommand
from application.user.commands.update_user import UpdateUserCommand
from application.user.results import Outcome
from domain.user.core.entities.user import User, UserCandidate
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.validation import EMAIL_INVALID, USERNAME_EMPTY


@pytest.fixture
def create_command(repository):
    """Create create-user command."""
    return CreateUserCommand(repository)


@pytest.fixture
def update_command(repository):
    """Create update-user command."""
    return UpdateUserCommand(repository)


@pytest.fixture
def delete_command(repository):
    """Create delete-user command."""
    return DeleteUserCommand(repository)


class TestCreateUser:
    @pytest.mark.asyncio
    async def test_first_user_gets_id_1(self, create_command, repository):
        result = await create_command.execute(UserCandidate("ada", "ada@example.com"))

        assert result.outcome is Outcome.CREATED
        assert result.value.id == 1
        assert await repository.get(1) == result.value

    @pytest.mark.asyncio
    async def test_id_is_max_plus_one(self, create_command, repository):
        await repository.create("a", "a@example.com")
        await repository.create("b", "b@example.com")
        await repository.delete(1)

        result = await create_command.execute(UserCandidate("c", "c@example.com"))

        assert result.value.id == 3

    @pytest.mark.asyncio
    async def test_freed_highest_id_is_reused(self, create_command, repository):
        await repository.create("a", "a@example.com")
        await repository.create("b", "b@example.com")
        await repository.delete(2)

        result = await create_command.execute(UserCandidate("c", "c@example.com"))

        assert result.value.id == 2

    @pytest.mark.asyncio
    async def test_invalid_candidate_not_stored(self, create_command, repository):
        result = await create_command.execute(UserCandidate("", "ada@example.com"))

        assert result.outcome is Outcome.INVALID
        assert result.error == USERNAME_EMPTY
        assert repository.count() == 0


class TestUpdateUser:
    @pytest.mark.asyncio
    async def test_update_success(self, update_command, repository):
        await repository.create("ada", "ada@example.com")

        result = await update_command.execute(1, UserCandidate("grace", "grace@example.com"))

        assert result.outcome is Outcome.OK
        assert result.value.id == 1
        assert result.value.username == "grace"
        stored = await repository.get(1)
        assert stored.email == "grace@example.com"

    @pytest.mark.asyncio
    async def test_update_not_found_checked_before_validation(self, update_command):
        result = await update_command.execute(42, UserCandidate("", ""))

        assert result.outcome is Outcome.NOT_FOUND
        assert result.error == "User with ID 42 not found."

    @pytest.mark.asyncio
    async def test_update_invalid_leaves_record(self, update_command, repository):
        await repository.create("ada", "ada@example.com")

        result = await update_command.execute(1, UserCandidate("grace", "grace-at-example"))

        assert result.outcome is Outcome.INVALID
        assert result.error == EMAIL_INVALID
        stored = await repository.get(1)
        assert stored.username == "ada"

    @pytest.mark.asyncio
    async def test_update_after_concurrent_delete(self):
        """Record removed between lookup and update is reported as not found."""
        repo = MagicMock(spec=IUserRepository)
        repo.get = AsyncMock(return_value=User(id=1, username="ada", email="ada@example.com"))
        repo.update = AsyncMock(return_value=None)

        result = await UpdateUserCommand(repo).execute(1, UserCandidate("grace", "grace@example.com"))

        assert result.outcome is Outcome.NOT_FOUND
        repo.update.assert_awaited_once_with(1, username="grace", email="grace@example.com")


class TestDeleteUser:
    @pytest.mark.asyncio
    async def test_delete_only_target(self, delete_command, repository):
        for name in ("a", "b", "c"):
            await repository.create(name, f"{name}@example.com")

        result = await delete_command.execute(2)

        assert result.outcome is Outcome.DELETED
        assert result.value is None
        assert [u.id for u in await repository.list()] == [1, 3]

    @pytest.mark.asyncio
    async def test_delete_not_found(self, delete_command):
        result = await delete_command.execute(9)

        assert result.outcome is Outcome.NOT_FOUND
        assert result.error == "User with ID 9 not found."
        assert result.is_success is False
