"""Authentication provider port (interface)."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class IAuthProvider(ABC):
    """Authentication provider interface.

    Abstracts bearer-token verification. Allows mocking in tests and
    swapping the token format without touching the middleware.
    """

    @abstractmethod
    async def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify bearer token and return its claims.

        Args:
            token: Raw token from the Authorization header

        Returns:
            Decoded claims (iss, aud, exp, sub, ...)

        Raises:
            InvalidTokenError: Bad signature, wrong issuer or audience,
                expired or malformed token

        Note:
            Implementation should:
            - Verify signature with the configured key
            - Validate issuer and audience
            - Check expiration
        """
        pass


class AuthError(Exception):
    """Base exception for authentication errors."""

    pass


class InvalidTokenError(AuthError):
    """Token is invalid, expired, or malformed."""

    pass
