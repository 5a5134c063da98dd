"""Tests for application startup, shutdown and static files."""

import logging
from unittest.mock import AsyncMock, MagicMock, patch

from fastapi.testclient import TestClient

from filmshelf.config import Settings
from filmshelf.main import create_app

MONGODB_URI = "mongodb://localhost:27017"


def make_settings(**overrides) -> Settings:
    values = {"tmdb_api_key": "test-key", "mongodb_uri": MONGODB_URI}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_motor_client(ping: AsyncMock | None = None) -> MagicMock:
    client = MagicMock()
    client.admin.command = ping or AsyncMock(return_value={"ok": 1})
    return client


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


class TestLifespan:
    def test_cold_start_connects(self) -> None:
        client = make_motor_client()
        app = create_app(make_settings())
        with patch("filmshelf.database.AsyncIOMotorClient", return_value=client) as client_cls:
            with TestClient(app) as test_client:
                response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "database": "connected"}
        client_cls.assert_called_once()
        client.admin.command.assert_awaited_once_with("ping")

    def test_shutdown_closes_client(self) -> None:
        client = make_motor_client()
        app = create_app(make_settings())
        with patch("filmshelf.database.AsyncIOMotorClient", return_value=client):
            with TestClient(app):
                client.close.assert_not_called()

        client.close.assert_called_once()
        assert app.state.connection_cache.is_connected is False

    def test_failed_cold_start_is_not_fatal(self, caplog) -> None:
        client = make_motor_client(ping=AsyncMock(side_effect=ConnectionError("no server")))
        app = create_app(make_settings())
        with patch("filmshelf.database.AsyncIOMotorClient", return_value=client):
            with caplog.at_level(logging.ERROR, logger="filmshelf"):
                with TestClient(app) as test_client:
                    response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "database": "disconnected"}
        assert any("MongoDB cold start error" in r.getMessage() for r in caplog.records)

    def test_no_connection_attempt_without_uri(self) -> None:
        app = create_app(make_settings(mongodb_uri=""))
        with patch("filmshelf.database.AsyncIOMotorClient") as client_cls:
            with TestClient(app) as test_client:
                response = test_client.get("/health")

        client_cls.assert_not_called()
        assert response.json()["database"] == "disconnected"


# ---------------------------------------------------------------------------
# Startup warnings
# ---------------------------------------------------------------------------


class TestStartupWarnings:
    def test_warns_once_per_missing_setting(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="filmshelf"):
            create_app(make_settings(tmdb_api_key="", mongodb_uri=""))

        warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert warnings == ["TMDB_API_KEY is not set", "MONGODB_URI is not set"]

    def test_no_warnings_when_configured(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="filmshelf"):
            create_app(make_settings())

        assert [r for r in caplog.records if r.levelno >= logging.WARNING] == []


# ---------------------------------------------------------------------------
# Static files
# ---------------------------------------------------------------------------


class TestStaticFiles:
    def test_serves_stylesheet(self) -> None:
        app = create_app(make_settings(mongodb_uri=""))
        with TestClient(app) as test_client:
            response = test_client.get("/static/style.css")

        assert response.status_code == 200
        assert "text/css" in response.headers["content-type"]

    def test_serves_script(self) -> None:
        app = create_app(make_settings(mongodb_uri=""))
        with TestClient(app) as test_client:
            response = test_client.get("/static/app.js")

        assert response.status_code == 200
