"""Body and path-id extraction shared by the endpoints.

Bodies are parsed as JSON whatever their Content-Type, so ``text/plain``
posts (``navigator.sendBeacon``, preflight-free fetches) are accepted.
Path ids are read from the undecoded request path, percent escapes intact.
"""

from typing import Any

from fastapi import Request

from valentine_api.domain.sanitization import sanitize

# /api/<resource>/<id>[/<action>]
ID_SEGMENT_INDEX = 3


class MalformedBodyError(Exception):
    """The request body is not usable JSON."""


async def read_json_body(request: Request) -> dict[str, Any]:
    """Parse the body as JSON. Arrays and scalars read as an empty mapping."""
    try:
        payload = await request.json()
    except ValueError as e:
        raise MalformedBodyError(str(e)) from e

    if payload is None:
        raise MalformedBodyError("body is JSON null")
    if not isinstance(payload, dict):
        return {}
    return payload


def path_id(request: Request) -> str:
    """Sanitized id segment of the raw request path."""
    raw_path = request.scope.get("raw_path")
    path = raw_path.decode("latin-1") if raw_path else request.url.path
    segments = path.split("?", 1)[0].split("/")
    if len(segments) <= ID_SEGMENT_INDEX:
        return ""
    return sanitize(segments[ID_SEGMENT_INDEX])
