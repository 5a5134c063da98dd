"""Seed script to populate initial film data."""

import asyncio
import logging

from filmshelf.config import settings
from filmshelf.database import ConnectionCache
from filmshelf.models.film import Film
from filmshelf.services.film_store import FilmStore

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger(__name__)

FILMS_DATA = [
    {
        "title": "The Godfather",
        "year": 1972,
        "starring": ["Marlon Brando", "Al Pacino", "James Caan"],
        "director": "Francis Ford Coppola",
        "genre": "Crime",
        "language": "English",
        "image": "https://image.tmdb.org/t/p/w342/3bhkrj58Vtu7enYsRolD1fZdja1.jpg",
    },
    {
        "title": "Parasite",
        "year": 2019,
        "starring": ["Song Kang-ho", "Lee Sun-kyun", "Cho Yeo-jeong"],
        "director": "Bong Joon-ho",
        "genre": "Thriller",
        "language": "Korean",
        "image": "https://image.tmdb.org/t/p/w342/7IiTTgloJzvGI1TAYymCfbfl3vT.jpg",
    },
    {
        "title": "La Haine",
        "year": 1995,
        "starring": ["Vincent Cassel", "Hubert Koundé", "Saïd Taghmaoui"],
        "director": "Mathieu Kassovitz",
        "genre": "Drama",
        "language": "French",
    },
    {
        "title": "Spirited Away",
        "year": 2001,
        "starring": ["Rumi Hiiragi", "Miyu Irino"],
        "director": "Hayao Miyazaki",
        "genre": "Animation",
        "language": "Japanese",
    },
]


async def seed_films() -> None:
    """Seed the database with initial film data."""
    connection = ConnectionCache(
        settings.mongodb_uri,
        settings.mongodb_database,
        timeout_ms=settings.mongodb_timeout_ms,
    )
    store = FilmStore(connection)

    try:
        for film_data in FILMS_DATA:
            film = Film(**film_data)

            # Check if film already exists
            if await store.find_by_title(film.title):
                logger.info(f"Film '{film.title}' already exists, skipping")
                continue

            film_id = await store.insert(film)
            logger.info(f"Added film: {film.title} ({film_id})")
    finally:
        await connection.close()


if __name__ == "__main__":
    asyncio.run(seed_films())
