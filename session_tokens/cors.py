"""ASGI middleware for the fixed, permissive CORS policy.

Starlette's CORSMiddleware only answers preflights that carry an ``Origin``
and ``Access-Control-Request-Method``. This service answers every ``OPTIONS``
request the same way regardless of headers or path, and stamps the same
header set onto every other response.
"""

from __future__ import annotations

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .config import CorsPolicy


class CorsHeadersMiddleware:
    def __init__(self, app: ASGIApp, policy: CorsPolicy | None = None) -> None:
        self.app = app
        self.headers = (policy or CorsPolicy()).headers()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        if scope["method"] == "OPTIONS":
            await self._preflight(send)
            return

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                for name, value in self.headers.items():
                    headers[name] = value
            await send(message)

        await self.app(scope, receive, send_wrapper)

    async def _preflight(self, send: Send) -> None:
        headers = [(b"content-length", b"0")]
        headers += [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in self.headers.items()]
        await send({"type": "http.response.start", "status": 200, "headers": headers})
        await send({"type": "http.response.body", "body": b""})
