"""Logging setup for the API process and the import command.

Each entry in ``LOGGER_CATEGORIES`` ties a Settings field to the loggers it
controls, so the request edge (origin rejections, unparseable bodies,
unhandled errors) can be turned up without drowning in SQL echo.
"""

import logging
import sys

from valentine_api.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

LOGGER_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("log_level_http", ("valentine_api.presentation",)),
    ("log_level_sql", ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite")),
    ("log_level_uvicorn", ("uvicorn", "uvicorn.access", "uvicorn.error")),
)


def setup_logging(settings: Settings | None = None) -> None:
    """Apply the configured levels; safe to call more than once."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    # uvicorn brings its own handlers; the import command and tests do not.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    for field_name, logger_names in LOGGER_CATEGORIES:
        level = _parse_level(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    numeric = logging.getLevelName(raw.strip().upper())
    return numeric if isinstance(numeric, int) else logging.INFO
