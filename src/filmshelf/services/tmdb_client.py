"""TMDb API client for movie search and detail lookups."""

import logging
from typing import Any

import httpx

from filmshelf.config import settings

logger = logging.getLogger(__name__)


class TMDbError(Exception):
    """Raised when a TMDb request fails or returns a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TMDbNotConfiguredError(TMDbError):
    """Raised when a lookup is attempted without an API key."""

    def __init__(self) -> None:
        super().__init__("TMDb API key not configured")


class TMDbClient:
    """Client for The Movie Database (TMDb) API."""

    BASE_URL = "https://api.themoviedb.org/3"
    SUGGESTION_LIMIT = 5

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        language: str | None = None,
    ) -> None:
        """
        Initialize TMDb client.

        Args:
            api_key: TMDb API key (uses settings if not provided)
            timeout: Request timeout in seconds (uses settings if not provided)
            language: Response language (uses settings if not provided)
        """
        self.api_key = api_key if api_key is not None else settings.tmdb_api_key
        self.timeout = timeout if timeout is not None else settings.tmdb_timeout
        self.language = language or settings.tmdb_language

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def _get(self, path: str, params: dict[str, Any]) -> Any:
        if not self.api_key:
            raise TMDbNotConfiguredError()

        params = {"api_key": self.api_key, **params}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(f"{self.BASE_URL}{path}", params=params)
        except httpx.HTTPError as e:
            raise TMDbError(f"TMDb request to {path} failed: {e}") from e

        if response.status_code >= 400:
            logger.warning(f"TMDb error status {response.status_code} for {path}")
            raise TMDbError(
                f"TMDb returned {response.status_code} for {path}",
                status_code=response.status_code,
            )
        return response.json()

    async def get_movie_details(self, tmdb_id: int | str) -> dict[str, Any]:
        """
        Get full metadata for one movie.

        Args:
            tmdb_id: TMDb movie ID

        Returns:
            Movie details payload as returned by TMDb

        Raises:
            TMDbNotConfiguredError: If no API key is configured
            TMDbError: On a non-success status or transport failure
        """
        return await self._get(f"/movie/{tmdb_id}", {"language": self.language})

    async def search_movies(self, query: str) -> list[dict[str, Any]]:
        """
        Search movies by title.

        Args:
            query: Free text search

        Returns:
            Raw result objects, at most one TMDb page

        Raises:
            TMDbNotConfiguredError: If no API key is configured
            TMDbError: On a non-success status or transport failure
        """
        data = await self._get("/search/movie", {"query": query})
        return data.get("results") or []

    async def suggest(self, query: str | None, limit: int = SUGGESTION_LIMIT) -> list[dict[str, Any]]:
        """
        Autocomplete suggestions for a partial title.

        No request is made for an empty query or without an API key.

        Args:
            query: Partial title typed by the user
            limit: Maximum number of suggestions

        Returns:
            List of {"title", "release_date"} dicts
        """
        if not query or not self.api_key:
            return []

        results = await self.search_movies(query)
        return [
            {"title": movie.get("title"), "release_date": movie.get("release_date")}
            for movie in results[:limit]
        ]
