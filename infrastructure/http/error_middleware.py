"""Uniform JSON error envelopes for the HTTP layer.

Every non-success response carries ``{"error": "..."}``:
- unexpected exceptions become 500 with a generic message
- framework 404s (no route matched) become "Resource not found."
- request parsing failures become 400 naming the offending field
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error."
NOT_FOUND_MESSAGE = "Resource not found."


def error_body(message: str) -> Dict[str, str]:
    return {"error": message}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(message))


class ErrorHandlingMiddleware:
    """ASGI middleware turning escaped exceptions into a 500 envelope.

    The exception is logged with its traceback; the client only sees
    ``{"error": "Internal server error."}``. If the response has already
    started there is nothing safe to send, so the exception is re-raised.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            logger.exception(
                "request.unhandled_error",
                extra={"method": scope.get("method"), "path": scope.get("path")},
            )
            if response_started:
                raise
            response = error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
            )
            await response(scope, receive, send)


async def http_exception_handler(request: Request, exc: Any) -> JSONResponse:
    """Envelope for HTTP errors raised by the framework itself."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = NOT_FOUND_MESSAGE
    else:
        message = str(exc.detail)
    response = error_response(exc.status_code, message)
    headers = getattr(exc, "headers", None)
    if headers:
        response.headers.update(headers)
    return response


async def validation_exception_handler(request: Request, exc: Any) -> JSONResponse:
    """400 envelope for unparsable path, query or body values."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        field = field or "body"
        message = f"invalid value for '{field}': {first.get('msg', 'invalid')}"
    else:
        message = "invalid request."
    return error_response(status.HTTP_400_BAD_REQUEST, message)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope handlers on the app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
