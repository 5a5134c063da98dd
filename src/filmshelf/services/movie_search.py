"""Two-stage movie search: TMDb first, film store as fallback."""

import logging
from typing import Any

from filmshelf.services.film_store import FilmStore
from filmshelf.services.tmdb_client import TMDbClient

logger = logging.getLogger(__name__)


class MovieSearch:
    """
    Search strategy backing `POST /search`.

    Stages:
    1. TMDb title search (skipped without text or API key)
    2. First few records of the film store, if stage 1 yielded nothing

    A failing stage is logged and counts as an empty result, so `search`
    never raises.
    """

    FALLBACK_LIMIT = 5

    def __init__(self, tmdb_client: TMDbClient, film_store: FilmStore) -> None:
        self.tmdb_client = tmdb_client
        self.film_store = film_store

    async def search(self, text: str | None) -> list[dict[str, Any]]:
        """
        Search for movies matching `text`.

        Returns:
            Raw TMDb results, or store films serialised with a string `_id`
        """
        movies = await self._search_tmdb(text)
        if not movies:
            movies = await self._store_fallback()

        logger.info(f"Search for {text!r} returned {len(movies)} items")
        return movies

    async def _search_tmdb(self, text: str | None) -> list[dict[str, Any]]:
        if not text or not self.tmdb_client.is_configured:
            return []

        try:
            return await self.tmdb_client.search_movies(text)
        except Exception as e:
            logger.error(f"TMDb search failed for {text!r}: {e}")
            return []

    async def _store_fallback(self) -> list[dict[str, Any]]:
        try:
            films = await self.film_store.list_all(limit=self.FALLBACK_LIMIT)
        except Exception as e:
            logger.error(f"Film store fallback failed: {e}", exc_info=True)
            return []

        return [film.to_json() for film in films]
