"""FastAPI dependencies wiring application state into route handlers."""

import json
import logging
from pathlib import Path
from typing import Any

from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates

from filmshelf.database import ConnectionCache, get_connection_cache
from filmshelf.services.film_store import FilmStore
from filmshelf.services.movie_search import MovieSearch
from filmshelf.services.tmdb_client import TMDbClient

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def get_film_store(
    connection: ConnectionCache = Depends(get_connection_cache),
) -> FilmStore:
    return FilmStore(connection)


def get_tmdb_client(request: Request) -> TMDbClient:
    return request.app.state.tmdb_client


def get_movie_search(
    tmdb_client: TMDbClient = Depends(get_tmdb_client),
    film_store: FilmStore = Depends(get_film_store),
) -> MovieSearch:
    return MovieSearch(tmdb_client, film_store)


async def get_json_body(request: Request) -> Any:
    """
    Request body decoded as JSON.

    Returns None for an empty body or one that is not valid JSON, leaving
    routes to decide how to answer instead of a framework 422.
    """
    body = await request.body()
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        logger.info(f"Ignoring non-JSON body on {request.url.path}")
        return None
