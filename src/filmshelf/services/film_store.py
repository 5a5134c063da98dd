"""Film record store backed by the MongoDB `films` collection."""

import logging
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError

from filmshelf.database import ConnectionCache
from filmshelf.models.film import FILMS_COLLECTION, Film, FilmRecord

logger = logging.getLogger(__name__)


class InvalidFilmIdError(ValueError):
    """Raised when a film id is not a valid ObjectId."""

    def __init__(self, film_id: Any) -> None:
        super().__init__(f"Invalid film id: {film_id!r}")
        self.film_id = film_id


def parse_film_id(film_id: str) -> ObjectId:
    try:
        return ObjectId(film_id)
    except (InvalidId, TypeError) as e:
        raise InvalidFilmIdError(film_id) from e


class FilmStore:
    """
    Read and like-count access to film records.

    Every operation awaits the shared connection first, so connection
    failures surface from the operation itself.
    """

    def __init__(self, connection: ConnectionCache) -> None:
        """
        Initialize film store.

        Args:
            connection: Connection cache handing out the film database
        """
        self.connection = connection

    async def _collection(self):
        db = await self.connection.ensure_connected()
        return db[FILMS_COLLECTION]

    async def list_all(self, limit: int | None = None) -> list[FilmRecord]:
        """
        Fetch film records in natural order.

        Args:
            limit: Maximum number of records (all records if not provided)

        Returns:
            List of films; documents that cannot be read at all are skipped
        """
        collection = await self._collection()
        cursor = collection.find({})
        if limit is not None:
            cursor = cursor.limit(limit)

        films = []
        async for document in cursor:
            try:
                films.append(FilmRecord.from_document(document))
            except ValidationError as e:
                logger.warning(f"Skipping unreadable film document {document.get('_id')}: {e}")
        return films

    async def get_by_id(self, film_id: str) -> FilmRecord | None:
        """
        Fetch one film record.

        Args:
            film_id: Store-assigned id as a hex string

        Returns:
            The film, or None if no record has that id

        Raises:
            InvalidFilmIdError: If film_id is malformed
        """
        object_id = parse_film_id(film_id)
        collection = await self._collection()
        document = await collection.find_one({"_id": object_id})
        if document is None:
            return None
        return FilmRecord.from_document(document)

    async def increment_likes(self, film_id: str, amount: int = 1) -> bool:
        """
        Atomically add `amount` to a film's like count.

        Args:
            film_id: Store-assigned id as a hex string
            amount: Value added to the count, no bounds applied

        Returns:
            True if a record matched the id

        Raises:
            InvalidFilmIdError: If film_id is malformed
        """
        object_id = parse_film_id(film_id)
        collection = await self._collection()
        result = await collection.update_one(
            {"_id": object_id},
            {"$inc": {"likes": amount}},
        )
        matched = result.matched_count > 0
        if matched:
            logger.info(f"Added {amount} like(s) to film {film_id}")
        else:
            logger.warning(f"Like for unknown film {film_id}")
        return matched

    async def insert(self, film: Film) -> str:
        """Insert a film record and return its new id."""
        collection = await self._collection()
        result = await collection.insert_one(film.to_document())
        logger.info(f"Inserted film '{film.title}' ({film.year})")
        return str(result.inserted_id)

    async def find_by_title(self, title: str) -> FilmRecord | None:
        collection = await self._collection()
        document = await collection.find_one({"title": title.strip()})
        if document is None:
            return None
        return FilmRecord.from_document(document)
