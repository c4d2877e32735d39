"""Shared test fixtures.

Provides JWT validation parameters, a token factory and an httpx client
bound to a fresh application and repository for every test.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any, AsyncIterator, Callable, Dict, Iterator

import jwt
import pytest
import pytest_asyncio
from dotenv import load_dotenv
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# Load .env.test if present (local overrides only, never required)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

from app import create_app  # noqa: E402
from infrastructure.config import TokenValidationParameters  # noqa: E402
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository  # noqa: E402
from infrastructure.user.jwt_provider import JwtTokenProvider  # noqa: E402
from infrastructure.user.repository_factory import get_user_repository  # noqa: E402

TEST_ISSUER = "https://issuer.test.local"
TEST_AUDIENCE = "user-management-api-tests"
TEST_KEY = "test-signing-key-that-is-long-enough-for-hs256"

TokenFactory = Callable[..., str]


@pytest.fixture
def token_params() -> TokenValidationParameters:
    """Validation parameters shared by the provider and the token factory."""
    return TokenValidationParameters(
        issuer=TEST_ISSUER,
        audience=TEST_AUDIENCE,
        signing_key=TEST_KEY,
        clock_skew_seconds=0,
    )


@pytest.fixture
def make_token(token_params: TokenValidationParameters) -> TokenFactory:
    """Factory minting HS256 tokens; keyword args override claims.

    Pass ``key=`` to sign with a different secret, or a claim set to None
    to drop it.
    """

    def _make(key: str | None = None, **overrides: Any) -> str:
        now = int(time.time())
        claims: Dict[str, Any] = {
            "sub": "tester",
            "iss": token_params.issuer,
            "aud": token_params.audience,
            "iat": now,
            "exp": now + 3600,
        }
        claims.update(overrides)
        claims = {k: v for k, v in claims.items() if v is not None}
        return jwt.encode(claims, key or token_params.signing_key, algorithm="HS256")

    return _make


@pytest.fixture
def auth_headers(make_token: TokenFactory) -> Dict[str, str]:
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def repository() -> InMemoryUserRepository:
    """Fixture providing clean InMemoryUserRepository."""
    return InMemoryUserRepository()


@pytest.fixture
def test_app(
    token_params: TokenValidationParameters, repository: InMemoryUserRepository
) -> Iterator[FastAPI]:
    """Application with a test token provider and an isolated repository."""
    application = create_app(auth_provider=JwtTokenProvider(token_params))
    application.dependency_overrides[get_user_repository] = lambda: repository
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client for REST tests.

    Uses httpx.AsyncClient with an explicit ASGITransport and a dummy
    base_url so relative requests resolve consistently.
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
