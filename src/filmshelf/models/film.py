"""Film document models for the `films` collection."""

from typing import Any

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

FILMS_COLLECTION = "films"


class FilmRecord(BaseModel):
    """
    Film document as read from the store.

    Records may be written by other tools, so every descriptive field is
    optional here. The store assigns `_id`; it is exposed as a 24-character
    hex string.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    id: str | None = Field(default=None, alias="_id")
    title: str | None = None
    year: int | None = None
    starring: list[str] = Field(default_factory=list)
    director: str | None = None
    genre: str | None = None
    language: str | None = None
    image: str | None = None
    likes: int = 0

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_object_id(cls, value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        return value

    @field_validator("starring", mode="before")
    @classmethod
    def _default_starring(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("likes", mode="before")
    @classmethod
    def _default_likes(cls, value: Any) -> Any:
        return 0 if value is None else value

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "FilmRecord":
        return cls.model_validate(document)

    def to_json(self) -> dict[str, Any]:
        """JSON shape used by the API, with `_id` as a string."""
        return self.model_dump(by_alias=True)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id!r}, title={self.title!r}, year={self.year})>"


class Film(FilmRecord):
    """Film document as written by this application: title, year and director are required."""

    title: str = Field(min_length=1)
    year: int
    director: str = Field(min_length=1)

    def to_document(self) -> dict[str, Any]:
        """Fields to persist; `_id` is left to the store."""
        return self.model_dump(exclude={"id"})
