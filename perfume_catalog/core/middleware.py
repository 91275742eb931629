"""
Request body size limit.

Requests that declare a Content-Length above the limit are answered with
413 before routing. Bodies without a declared length are counted as they
stream in and fail with the same error once they cross the limit.
"""

from __future__ import annotations

import logging

from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from perfume_catalog.core import exceptions


# Module logger
logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware:
    """ASGI middleware rejecting request bodies larger than ``max_body_bytes``."""

    def __init__(self, app: ASGIApp, max_body_bytes: int) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = self._declared_length(scope)
        if declared is not None and declared > self.max_body_bytes:
            logger.warning(f"Rejected {declared} byte body on {scope.get('path')}")
            error = exceptions.payload_too_large(self.max_body_bytes)
            response = JSONResponse(status_code=error.status_code, content=error.to_dict())
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    raise exceptions.payload_too_large(self.max_body_bytes)
            return message

        await self.app(scope, limited_receive, send)

    @staticmethod
    def _declared_length(scope: Scope):
        for name, value in scope.get("headers", []):
            if name == b"content-length":
                try:
                    return int(value)
                except ValueError:
                    return None
        return None
