"""Input sanitization for user-supplied strings.

Every string pulled from a request body or path goes through one of these
before it reaches the store.  They never raise: a value that is not a
string becomes an empty string, and the caller decides whether empty is
acceptable.
"""

import re
from typing import Any

MAX_FIELD_LENGTH = 100
MAX_MESSAGE_LENGTH = 500

_FIELD_STRIP = re.compile(r"[<>\"'&]")
_MESSAGE_STRIP = re.compile(r"[<>\"']")


def sanitize(value: Any) -> str:
    """Strip ``< > " ' &``, trim whitespace and cap at 100 characters."""
    if not isinstance(value, str):
        return ""
    return _FIELD_STRIP.sub("", value).strip()[:MAX_FIELD_LENGTH]


def sanitize_message(value: Any) -> str:
    """Like :func:`sanitize` but keeps ``&`` and allows 500 characters."""
    if not isinstance(value, str):
        return ""
    return _MESSAGE_STRIP.sub("", value).strip()[:MAX_MESSAGE_LENGTH]
