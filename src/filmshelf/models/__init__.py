"""Document models."""

from filmshelf.models.film import FILMS_COLLECTION, Film, FilmRecord

__all__ = ["FILMS_COLLECTION", "Film", "FilmRecord"]
