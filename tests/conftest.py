"""Shared test fixtures."""

import pytest
from fastapi import FastAPI
from mongomock_motor import AsyncMongoMockClient

from filmshelf.config import Settings
from filmshelf.main import create_app
from filmshelf.services.film_store import FilmStore


class StaticConnection:
    """Stands in for ConnectionCache, handing out a fixed database."""

    def __init__(self, db) -> None:
        self.db = db
        self.calls = 0

    @property
    def is_connected(self) -> bool:
        return True

    async def ensure_connected(self):
        self.calls += 1
        return self.db


class BrokenConnection:
    """Stands in for ConnectionCache when MongoDB is unreachable."""

    is_connected = False

    async def ensure_connected(self):
        raise ConnectionError("MongoDB unreachable")


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, tmdb_api_key="test-key", mongodb_uri="")


@pytest.fixture
def test_app(settings: Settings) -> FastAPI:
    """Application without a running lifespan, for API tests."""
    return create_app(settings)


@pytest.fixture
def mongo_db():
    return AsyncMongoMockClient()["filmshelf_test"]


@pytest.fixture
def film_store(mongo_db) -> FilmStore:
    return FilmStore(StaticConnection(mongo_db))


@pytest.fixture
def broken_store() -> FilmStore:
    return FilmStore(BrokenConnection())
