"""Pydantic schemas for API requests and responses."""

from filmshelf.schemas.film import (
    LikeRequest,
    LikeResponse,
    MovieSuggestion,
    SearchRequest,
    SearchResponse,
    SuggestResponse,
)

__all__ = [
    "LikeRequest",
    "LikeResponse",
    "MovieSuggestion",
    "SearchRequest",
    "SearchResponse",
    "SuggestResponse",
]
