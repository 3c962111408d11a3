"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI

from valentine_api.config import get_settings
from valentine_api.infrastructure.database import create_tables, engine
from valentine_api.infrastructure.logging.log_config import setup_logging
from valentine_api.presentation.api.error_handlers import register_error_handlers
from valentine_api.presentation.api.router import router as api_router
from valentine_api.presentation.middleware.origin_gate import OriginGateMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and create tables."""
    setup_logging()

    await create_tables()
    logger.info("Database ready (%s)", engine.url.render_as_string(hide_password=True))

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.add_middleware(
        OriginGateMiddleware,
        allowed_origins=settings.allowed_origins,
        canonical_origin=settings.canonical_origin,
        max_age=settings.cors_max_age,
    )
    register_error_handlers(app)

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "valentine_api.main:app",
        host="0.0.0.0",
        port=8787,
        reload=get_settings().app_env == "development",
    )
