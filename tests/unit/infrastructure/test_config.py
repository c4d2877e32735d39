"""Tests for environment configuration."""

import os
from unittest.mock import patch

import pytest

from infrastructure.config import (
    get_app_version,
    get_log_level,
    get_token_validation_parameters,
    load_token_validation_parameters,
)

BASE_ENV = {
    "JWT_ISSUER": "https://issuer.example.com",
    "JWT_AUDIENCE": "user-api",
    "JWT_KEY": "a-very-long-signing-key-for-the-config-tests",
}


def test_load_parameters_defaults():
    with patch.dict(os.environ, BASE_ENV, clear=True):
        params = load_token_validation_parameters()

    assert params.issuer == "https://issuer.example.com"
    assert params.audience == "user-api"
    assert params.signing_key == BASE_ENV["JWT_KEY"]
    assert params.validate_issuer is True
    assert params.validate_audience is True
    assert params.validate_lifetime is True
    assert params.algorithms == ("HS256",)
    assert params.clock_skew_seconds == 300


def test_load_parameters_overrides():
    env = dict(BASE_ENV, JWT_VALIDATE_LIFETIME="false", JWT_CLOCK_SKEW_SECONDS="0")
    with patch.dict(os.environ, env, clear=True):
        params = load_token_validation_parameters()

    assert params.validate_lifetime is False
    assert params.clock_skew_seconds == 0


@pytest.mark.parametrize(
    "missing,message",
    [
        ("JWT_KEY", "JWT_KEY is missing"),
        ("JWT_ISSUER", "JWT_ISSUER is required"),
        ("JWT_AUDIENCE", "JWT_AUDIENCE is required"),
    ],
)
def test_missing_required_variable(missing, message):
    env = {k: v for k, v in BASE_ENV.items() if k != missing}
    with patch.dict(os.environ, env, clear=True):
        with pytest.raises(ValueError, match=message):
            load_token_validation_parameters()


def test_parameters_read_once():
    get_token_validation_parameters.cache_clear()
    try:
        with patch.dict(os.environ, BASE_ENV, clear=True):
            first = get_token_validation_parameters()
        with patch.dict(os.environ, dict(BASE_ENV, JWT_ISSUER="changed"), clear=True):
            second = get_token_validation_parameters()
        assert first is second
        assert second.issuer == "https://issuer.example.com"
    finally:
        get_token_validation_parameters.cache_clear()


def test_app_version_and_log_level():
    with patch.dict(os.environ, {"APP_VERSION": "1.2.3", "LOG_LEVEL": "debug"}, clear=True):
        assert get_app_version() == "1.2.3"
        assert get_log_level() == "DEBUG"

    with patch.dict(os.environ, {}, clear=True):
        assert get_app_version() == "0.0.0-dev"
        assert get_log_level() == "INFO"
