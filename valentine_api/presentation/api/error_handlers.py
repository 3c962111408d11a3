"""Exception handlers — every error leaves the API as ``{"error": "..."}``."""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from valentine_api.presentation.api.request_parsing import MalformedBodyError

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND_MESSAGE = "Not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(message: str, status_code: int, headers: dict | None = None) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # A known path with the wrong method is reported like any unknown path.
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return error_response(ROUTE_NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)

    detail = exc.detail
    if exc.status_code == status.HTTP_404_NOT_FOUND and detail == HTTPStatus.NOT_FOUND.phrase:
        detail = ROUTE_NOT_FOUND_MESSAGE
    return error_response(str(detail), exc.status_code, headers=getattr(exc, "headers", None))


async def malformed_body_handler(request: Request, exc: MalformedBodyError) -> JSONResponse:
    """Unparseable bodies are server errors to the client; details stay in the log."""
    logger.warning(
        "Could not parse request body for %s %s: %s",
        request.method,
        request.url.path,
        exc,
    )
    return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(MalformedBodyError, malformed_body_handler)
