from __future__ import annotations

# Standard library
import os
import logging as _logging
from contextlib import asynccontextmanager
from typing import Any, Optional

# Third-party
from fastapi import FastAPI

# Local application imports
from api.users import router as users_router
from domain.user.auth.ports.auth_provider import IAuthProvider
from infrastructure.config import (
    get_app_version,
    get_log_level,
    get_token_validation_parameters,
)
from infrastructure.http.error_middleware import (
    ErrorHandlingMiddleware,
    register_exception_handlers,
)
from infrastructure.http.logging_middleware import RequestResponseLoggingMiddleware
from infrastructure.user.auth_middleware import AuthMiddleware
from infrastructure.user.repository_factory import get_user_repository

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = get_log_level()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

for _ln in ("startup", "infrastructure.http.logging_middleware"):
    _lg = _logging.getLogger(_ln)
    if _lg.level == 0:  # not set explicitly
        _lg.setLevel(getattr(_logging, _LOG_LEVEL, _logging.INFO))

APP_VERSION = get_app_version()


@asynccontextmanager
async def lifespan(application: FastAPI) -> Any:  # pragma: no cover
    """Application lifecycle: validate configuration and warm the user repository."""
    logger = _logging.getLogger("startup")

    # Fail fast on missing JWT_* configuration instead of on the first request
    if getattr(application.state, "auth_provider", None) is None:
        get_token_validation_parameters()

    repository = get_user_repository()
    logger.info(
        "lifespan.startup",
        extra={
            "repository": type(repository).__name__,
            "jwt_key_present": bool(os.getenv("JWT_KEY")),
            "jwt_issuer": os.getenv("JWT_ISSUER"),
        },
    )

    logger.info("lifespan.ready", extra={"status": "serving"})
    yield
    logger.info("lifespan.shutdown", extra={"status": "cleanup"})


def create_app(auth_provider: Optional[IAuthProvider] = None) -> FastAPI:
    """Build the application.

    Middleware order, outermost first: request/response logging, error
    envelope, bearer-token authentication.

    Args:
        auth_provider: Token provider for AuthMiddleware (defaults to a
            JwtTokenProvider reading JWT_* variables on first request)
    """
    application = FastAPI(
        title="User Management API",
        version=APP_VERSION,
        lifespan=lifespan,
    )
    application.state.auth_provider = auth_provider

    # add_middleware prepends: last added runs first
    application.add_middleware(AuthMiddleware, auth_provider=auth_provider)
    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(RequestResponseLoggingMiddleware)

    register_exception_handlers(application)
    application.include_router(users_router)

    @application.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @application.get("/version")
    async def version() -> dict[str, str]:
        return {"version": APP_VERSION}

    return application


app = create_app()

# Explicit export per mypy/tests
__all__: list[str] = ["app", "create_app"]


if __name__ == "__main__":
    import uvicorn
    from dotenv import load_dotenv

    load_dotenv()
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=port,
        reload=os.getenv("ENVIRONMENT") == "development",
    )
