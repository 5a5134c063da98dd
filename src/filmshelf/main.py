"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from filmshelf.api.routes import health, movies, pages
from filmshelf.config import Settings, settings as default_settings
from filmshelf.database import ConnectionCache
from filmshelf.services.tmdb_client import TMDbClient

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    cache: ConnectionCache = app.state.connection_cache

    # Startup: warm the connection cache if a database is configured
    if cache.mongodb_uri:
        try:
            await cache.ensure_connected()
            logger.info("MongoDB connected (cold start)")
        except Exception as e:
            logger.error(f"MongoDB cold start error: {e}")

    yield

    # Shutdown: release the client
    await cache.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application with its own connection cache and TMDb client.

    Args:
        settings: Settings to use (module settings if not provided)
    """
    settings = settings or default_settings

    if not settings.tmdb_api_key:
        logger.warning("TMDB_API_KEY is not set")
    if not settings.mongodb_uri:
        logger.warning("MONGODB_URI is not set")

    app = FastAPI(
        title="Filmshelf",
        description="Movie catalog with TMDb search and likes",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.connection_cache = ConnectionCache(
        settings.mongodb_uri,
        settings.mongodb_database,
        timeout_ms=settings.mongodb_timeout_ms,
    )
    app.state.tmdb_client = TMDbClient(
        api_key=settings.tmdb_api_key,
        timeout=settings.tmdb_timeout,
        language=settings.tmdb_language,
    )

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # Include routers
    app.include_router(health.router)
    app.include_router(pages.router, tags=["pages"])
    app.include_router(movies.router, tags=["movies"])

    return app


def run() -> None:
    """Serve the application with uvicorn."""
    logging.basicConfig(
        level=default_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.info(f"Server running on http://localhost:{default_settings.api_port}")
    uvicorn.run(
        "filmshelf.main:create_app",
        factory=True,
        host=default_settings.api_host,
        port=default_settings.api_port,
    )


if __name__ == "__main__":
    run()
