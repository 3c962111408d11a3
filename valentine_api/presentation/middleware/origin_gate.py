"""Origin allow-list gate and CORS headers.

Starlette's ``CORSMiddleware`` only decorates responses; this API must also
refuse disallowed browser origins outright, answer preflights itself, and
fall back to the production origin for callers that send no ``Origin``.
The gate is also the outermost catch-all, so every failure still leaves as
JSON with the CORS headers attached.
"""

import logging

from starlette.datastructures import Headers, MutableHeaders
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from valentine_api.presentation.api.error_handlers import INTERNAL_ERROR_MESSAGE

logger = logging.getLogger(__name__)

ALLOWED_METHODS = "GET, POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type"


class OriginGateMiddleware:
    """Reject requests from unknown origins and attach CORS headers to the rest."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        allowed_origins: list[str],
        canonical_origin: str,
        max_age: int = 86400,
    ) -> None:
        self.app = app
        self.allowed_origins = frozenset(allowed_origins)
        self.canonical_origin = canonical_origin
        self.max_age = max_age

    def resolve_origin(self, origin: str | None) -> str | None:
        """Return the origin to echo back, or None if it is not allowed."""
        if origin in self.allowed_origins:
            return origin
        if not origin:
            return self.canonical_origin
        return None

    def cors_headers(self, origin: str | None) -> dict[str, str]:
        if not origin:
            return {}
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Methods": ALLOWED_METHODS,
            "Access-Control-Allow-Headers": ALLOWED_HEADERS,
            "Access-Control-Max-Age": str(self.max_age),
        }

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        method = scope["method"]
        path = scope["path"]
        origin = Headers(scope=scope).get("origin")
        resolved = self.resolve_origin(origin)

        if method == "OPTIONS":
            if resolved is None:
                logger.warning("Rejected preflight from origin %s", origin)
                response = PlainTextResponse("Forbidden", status_code=403)
            else:
                response = Response(status_code=204, headers=self.cors_headers(resolved))
            await response(scope, receive, send)
            return

        # No CORS headers here: the browser must not expose this body.
        if origin and origin not in self.allowed_origins:
            logger.warning("Rejected %s %s from origin %s", method, path, origin)
            response = JSONResponse({"error": "Forbidden"}, status_code=403)
            await response(scope, receive, send)
            return

        cors = self.cors_headers(resolved)
        response_started = False

        async def send_with_cors(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
                headers = MutableHeaders(scope=message)
                headers.update(cors)
            await send(message)

        try:
            await self.app(scope, receive, send_with_cors)
        except Exception:
            logger.exception("Unhandled error for %s %s", method, path)
            if response_started:
                raise
            response = JSONResponse(
                {"error": INTERNAL_ERROR_MESSAGE}, status_code=500, headers=cors
            )
            await response(scope, receive, send)
