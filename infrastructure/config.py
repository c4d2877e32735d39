"""Configuration utilities for infrastructure layer."""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple


@dataclass(frozen=True)
class TokenValidationParameters:
    """Parameters used to verify every bearer token.

    Built once at startup and shared by all requests.
    """

    issuer: str
    audience: str
    signing_key: str
    validate_issuer: bool = True
    validate_audience: bool = True
    validate_lifetime: bool = True
    algorithms: Tuple[str, ...] = ("HS256",)
    clock_skew_seconds: int = 300


def _env_flag(name: str, default: str = "true") -> bool:
    return os.getenv(name, default).lower() == "true"


def load_token_validation_parameters() -> TokenValidationParameters:
    """
    Read token validation parameters from the environment.

    Environment Variables:
    - JWT_ISSUER: expected issuer (required)
    - JWT_AUDIENCE: expected audience (required)
    - JWT_KEY: symmetric signing key (required)
    - JWT_VALIDATE_LIFETIME: "false" to skip the exp check (default: "true")
    - JWT_CLOCK_SKEW_SECONDS: leeway applied to exp (default: 300)

    Raises:
        ValueError: If a required variable is missing
    """
    issuer = os.getenv("JWT_ISSUER")
    audience = os.getenv("JWT_AUDIENCE")
    key = os.getenv("JWT_KEY")

    if not key:
        raise ValueError("JWT_KEY is missing")
    if not issuer:
        raise ValueError("JWT_ISSUER is required")
    if not audience:
        raise ValueError("JWT_AUDIENCE is required")

    return TokenValidationParameters(
        issuer=issuer,
        audience=audience,
        signing_key=key,
        validate_lifetime=_env_flag("JWT_VALIDATE_LIFETIME"),
        clock_skew_seconds=int(os.getenv("JWT_CLOCK_SKEW_SECONDS", "300")),
    )


@lru_cache()
def get_token_validation_parameters() -> TokenValidationParameters:
    """Get cached token validation parameters (read once per process)."""
    return load_token_validation_parameters()


def get_app_version() -> str:
    """Version reported by /version, from APP_VERSION (Docker build ARG)."""
    return os.getenv("APP_VERSION", "0.0.0-dev")


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
