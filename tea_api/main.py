"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from tea_api import __version__
from tea_api.api import brews, health, teapots, teas
from tea_api.config import Settings, get_settings
from tea_api.exceptions import APIError, api_error_handler, request_validation_handler
from tea_api.seed import seed_demo_data
from tea_api.store import MemoryStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Send application logs to stderr at the configured level."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(store: MemoryStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the application around a store.

    The caller owns the store. Without one, a fresh empty store is created
    for this application only.
    """
    settings = settings or get_settings()
    store = store if store is not None else MemoryStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle application startup and shutdown events."""
        if settings.seed_demo_data:
            seed_demo_data(app.state.store)
        logger.info(f"Tea API {settings.app_version} started ({settings.environment})")
        yield

    app = FastAPI(
        title="Tea API",
        description="Teapots, teas, brews and steeps. TIF-compliant.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.settings = settings

    # CORS middleware for development
    if settings.is_development:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[
                "http://localhost:3000",
                "http://localhost:3001",
            ],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Register routers
    app.include_router(health.router)
    app.include_router(teapots.router)
    app.include_router(teas.router)
    app.include_router(brews.router)

    return app
