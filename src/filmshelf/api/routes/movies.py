"""JSON endpoints: autocomplete, search and likes."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from filmshelf.api.dependencies import (
    get_film_store,
    get_json_body,
    get_movie_search,
    get_tmdb_client,
)
from filmshelf.schemas.film import (
    LikeRequest,
    LikeResponse,
    SearchRequest,
    SearchResponse,
    SuggestResponse,
)
from filmshelf.services.film_store import FilmStore, InvalidFilmIdError
from filmshelf.services.movie_search import MovieSearch
from filmshelf.services.tmdb_client import TMDbClient

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/suggest", response_model=SuggestResponse)
async def suggest(
    query: str | None = Query(default=None, description="Partial movie title"),
    tmdb_client: TMDbClient = Depends(get_tmdb_client),
) -> SuggestResponse:
    """
    Autocomplete movie titles.

    Returns up to five {title, release_date} entries. Any failure yields an
    empty list.
    """
    try:
        movies = await tmdb_client.suggest(query)
    except Exception as e:
        logger.error(f"ERROR in /suggest: {e}")
        movies = []

    return SuggestResponse(movies=movies)


@router.post("/search", response_model=SearchResponse)
async def search(
    payload: Any = Depends(get_json_body),
    movie_search: MovieSearch = Depends(get_movie_search),
) -> SearchResponse:
    """
    Search TMDb, falling back to the first films of the catalog.

    Body: {"text": str}. Never fails: a body that cannot be read searches
    without text, and both sources being unavailable yields an empty list.
    """
    text = None
    if isinstance(payload, dict):
        try:
            text = SearchRequest.model_validate(payload).text
        except ValidationError as e:
            logger.info(f"Ignoring unreadable search body: {e}")
    movies = await movie_search.search(text)
    return SearchResponse(movies=movies)


@router.post("/like/{film_id}", response_model=LikeResponse)
async def like(
    film_id: str,
    payload: Any = Depends(get_json_body),
    film_store: FilmStore = Depends(get_film_store),
) -> LikeResponse | JSONResponse:
    """
    Add likes to a stored film.

    Body: {"count": int}, optional. Answers {"success": false} with 400 for a
    malformed id or count, 404 for an unknown film and 500 when the store fails.
    """
    amount = 1
    if isinstance(payload, dict):
        try:
            amount = LikeRequest.model_validate(payload).amount
        except ValidationError:
            logger.info(f"Malformed like body for film {film_id}: {payload!r}")
            return JSONResponse({"success": False}, status_code=400)

    try:
        matched = await film_store.increment_likes(film_id, amount)
    except InvalidFilmIdError:
        logger.info(f"Malformed film id in like route: {film_id!r}")
        return JSONResponse({"success": False}, status_code=400)
    except Exception as e:
        logger.error(f"ERROR in like route: {e}", exc_info=True)
        return JSONResponse({"success": False}, status_code=500)

    if not matched:
        return JSONResponse({"success": False}, status_code=404)

    return LikeResponse(success=True)
