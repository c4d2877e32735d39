"""FastAPI authentication middleware."""

import logging
from typing import Any, Optional, Tuple

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from domain.user.auth.ports.auth_provider import IAuthProvider, InvalidTokenError
from infrastructure.user.jwt_provider import JwtTokenProvider

logger = logging.getLogger(__name__)

PROTECTED_PREFIXES: Tuple[str, ...] = ("/users",)


class AuthMiddleware(BaseHTTPMiddleware):
    """FastAPI middleware for JWT authentication.

    Verifies bearer tokens on protected paths and sets auth claims in
    request.state for downstream handlers.

    Rejections are plain 401 responses with an empty body and a
    ``WWW-Authenticate: Bearer`` header. The reason is only logged.

    Examples:
        >>> app.add_middleware(AuthMiddleware)
        >>> # In route handler:
        >>> auth_claims = request.state.auth_claims
    """

    def __init__(
        self,
        app: Any,
        auth_provider: Optional[IAuthProvider] = None,
        protected_prefixes: Tuple[str, ...] = PROTECTED_PREFIXES,
    ) -> None:
        """Initialize middleware.

        Args:
            app: ASGI application
            auth_provider: Token provider (optional, creates JwtTokenProvider if None)
            protected_prefixes: Path prefixes that require a valid token
        """
        super().__init__(app)
        self.auth_provider = auth_provider or JwtTokenProvider()
        self.protected_prefixes = protected_prefixes

    async def dispatch(self, request: Request, call_next: Any) -> Any:
        """Process request and verify JWT token.

        Args:
            request: FastAPI request
            call_next: Next middleware/handler in chain

        Returns:
            Response from handler or 401
        """
        if not self._is_protected(request.url.path):
            return await call_next(request)

        # Extract token from Authorization header
        auth_header = request.headers.get("Authorization")
        token = self._extract_token(auth_header)

        if not token:
            return self._unauthorized(request, "missing_token")

        try:
            claims = await self.auth_provider.verify_token(token)
        except InvalidTokenError as e:
            return self._unauthorized(request, str(e))

        request.state.auth_claims = claims
        return await call_next(request)

    def _is_protected(self, path: str) -> bool:
        return any(path == p or path.startswith(p + "/") for p in self.protected_prefixes)

    def _unauthorized(self, request: Request, reason: str) -> Response:
        logger.warning(
            "auth.rejected",
            extra={"path": request.url.path, "reason": reason},
        )
        return Response(
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )

    def _extract_token(self, auth_header: Optional[str]) -> Optional[str]:
        """Extract Bearer token from Authorization header.

        Args:
            auth_header: Authorization header value

        Returns:
            JWT token or None

        Examples:
            >>> self._extract_token("Bearer eyJ...")
            'eyJ...'
            >>> self._extract_token("eyJ...")  # Missing Bearer
            None
        """
        if not auth_header:
            return None

        parts = auth_header.split()

        if len(parts) != 2:
            return None

        scheme, token = parts

        if scheme.lower() != "bearer":
            return None

        return token
