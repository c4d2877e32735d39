"""JWT bearer-token provider implementation."""

import logging
from typing import Any, Dict, List, Optional

import jwt
from jwt.exceptions import ExpiredSignatureError
from jwt.exceptions import InvalidTokenError as JWTError

from domain.user.auth.ports.auth_provider import IAuthProvider, InvalidTokenError
from infrastructure.config import (
    TokenValidationParameters,
    get_token_validation_parameters,
)

logger = logging.getLogger(__name__)


class JwtTokenProvider(IAuthProvider):
    """Verifies symmetric-key (HS256) JWTs issued by an external system.

    Features:
    - Signature check against the configured key
    - Issuer and audience validation
    - Expiry check with clock skew leeway

    Examples:
        >>> provider = JwtTokenProvider()
        >>> claims = await provider.verify_token(token)
        >>> claims["iss"]
        'https://issuer.example.com'
    """

    def __init__(self, parameters: Optional[TokenValidationParameters] = None) -> None:
        """Initialize provider.

        Args:
            parameters: Validation parameters (defaults to the process-wide
                parameters read from the environment)

        Raises:
            ValueError: If required configuration is missing
        """
        self.parameters = parameters or get_token_validation_parameters()

    async def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify JWT and return its claims.

        Args:
            token: JWT from the Authorization header

        Returns:
            Decoded claims dictionary

        Raises:
            InvalidTokenError: If token is invalid, expired, or malformed
        """
        params = self.parameters
        required: List[str] = []
        if params.validate_lifetime:
            required.append("exp")
        if params.validate_issuer:
            required.append("iss")
        if params.validate_audience:
            required.append("aud")

        try:
            payload: Dict[str, Any] = jwt.decode(
                token,
                params.signing_key,
                algorithms=list(params.algorithms),
                audience=params.audience if params.validate_audience else None,
                issuer=params.issuer if params.validate_issuer else None,
                leeway=params.clock_skew_seconds,
                options={
                    "verify_signature": True,
                    "verify_exp": params.validate_lifetime,
                    "verify_aud": params.validate_audience,
                    "verify_iss": params.validate_issuer,
                    "require": required,
                },
            )
            return payload

        except ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except JWTError as e:
            raise InvalidTokenError(f"Invalid token: {str(e)}") from e
