"""Pydantic schemas for the movie JSON endpoints."""

from typing import Any

from pydantic import BaseModel, field_validator


class MovieSuggestion(BaseModel):
    """Autocomplete entry."""

    title: str | None = None
    release_date: str | None = None


class SuggestResponse(BaseModel):
    movies: list[MovieSuggestion]


class SearchRequest(BaseModel):
    """Search request body. Numbers are searched for as text."""

    text: str | None = None

    @field_validator("text", mode="before")
    @classmethod
    def _stringify_scalar(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (int, float)):
            return str(value)
        return value


class SearchResponse(BaseModel):
    """Search results, either raw TMDb results or serialised store films."""

    movies: list[dict[str, Any]]


class LikeRequest(BaseModel):
    """Like request body. A missing or zero count counts as one like."""

    count: int | None = None

    @property
    def amount(self) -> int:
        return self.count or 1


class LikeResponse(BaseModel):
    success: bool
