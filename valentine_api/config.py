from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)

PRODUCTION_ORIGIN = "https://willyoubemyvalentine.fun"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Valentine API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./valentine.db"
    database_echo: bool = False

    # CORS — exact Origin values allowed to call the API from a browser
    allowed_origins: list[str] = [
        PRODUCTION_ORIGIN,
        "https://www.willyoubemyvalentine.fun",
        "http://localhost:3000",
        "http://localhost:8080",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:8080",
    ]
    # Used for requests that carry no Origin header (curl, server-side callers)
    canonical_origin: str = PRODUCTION_ORIGIN
    cors_max_age: int = 86400

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "INFO"             # origin gate, body parsing, 500s
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
