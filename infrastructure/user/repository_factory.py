"""User repository factory for environment-based selection.

This factory creates the repository implementation selected by the
USER_REPOSITORY environment variable:
- "inmemory": InMemoryUserRepository

Default: inmemory
"""

import os
import threading
from typing import Optional

from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.user.in_memory_user_repository import (
    InMemoryUserRepository,
)


def create_user_repository() -> IUserRepository:
    """Create user repository based on environment configuration.

    Returns:
        IUserRepository: The configured repository implementation

    Environment Variables:
        USER_REPOSITORY: "inmemory" (default: inmemory)
    """
    repo_type = os.getenv("USER_REPOSITORY", "inmemory").lower()

    if repo_type == "inmemory":
        return InMemoryUserRepository()

    raise ValueError(
        f"Invalid USER_REPOSITORY value: {repo_type}. " "Expected 'inmemory'"
    )


# Singleton instance
_user_repository: Optional[IUserRepository] = None
_lock = threading.Lock()


def get_user_repository() -> IUserRepository:
    """Get singleton user repository instance.

    Returns:
        IUserRepository: The singleton repository
    """
    global _user_repository

    with _lock:
        if _user_repository is None:
            _user_repository = create_user_repository()

    return _user_repository


def reset_user_repository() -> None:
    """Reset the singleton (for testing purposes)."""
    global _user_repository
    _user_repository = None
