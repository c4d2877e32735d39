"""Request/response logging middleware."""

import logging
from typing import List, Optional

from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


class RequestResponseLoggingMiddleware:
    """ASGI middleware logging each request and the response it produced.

    The response body is captured by wrapping ``send``: every message is
    copied into a buffer and then forwarded unchanged, so status, headers
    and bytes seen by the client are exactly what the app produced.

    Examples:
        >>> app.add_middleware(RequestResponseLoggingMiddleware)
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        method = scope.get("method", "")
        path = scope.get("path", "")
        logger.info(
            f"request.received {method} {path}",
            extra={"method": method, "path": path},
        )

        status_code: Optional[int] = None
        chunks: List[bytes] = []

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            elif message["type"] == "http.response.body":
                chunks.append(message.get("body", b""))
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            body = b"".join(chunks).decode("utf-8", errors="replace")
            logger.info(
                f"response.sent {status_code} {body}",
                extra={"method": method, "path": path, "status_code": status_code},
            )
