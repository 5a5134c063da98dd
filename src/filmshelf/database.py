"""MongoDB connection cache and request dependency."""

import asyncio
import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


class StoreNotConfiguredError(RuntimeError):
    """Raised when no MongoDB connection string is configured."""


class ConnectionCache:
    """
    Lazily connected, shared handle to the film database.

    Holds at most one live client and at most one in-flight connection
    attempt. Callers arriving while an attempt is pending await that same
    attempt. A failed attempt is not remembered: the next call starts over.
    """

    def __init__(
        self,
        mongodb_uri: str,
        database_name: str,
        timeout_ms: int = 5000,
    ) -> None:
        self.mongodb_uri = mongodb_uri
        self.database_name = database_name
        self.timeout_ms = timeout_ms

        self._client: AsyncIOMotorClient | None = None
        self._database: AsyncIOMotorDatabase | None = None
        self._pending: asyncio.Task | None = None

    @property
    def is_connected(self) -> bool:
        return self._database is not None

    async def ensure_connected(self) -> AsyncIOMotorDatabase:
        """
        Return the shared database handle, connecting on first use.

        Raises:
            StoreNotConfiguredError: No connection string configured
            Exception: Whatever the connection attempt failed with
        """
        if self._database is not None:
            return self._database

        if not self.mongodb_uri:
            raise StoreNotConfiguredError("MONGODB_URI is not set")

        if self._pending is None:
            self._pending = asyncio.create_task(self._connect())
            self._pending.add_done_callback(self._attempt_done)

        # Shielded so a cancelled request does not cancel the shared attempt
        return await asyncio.shield(self._pending)

    def _attempt_done(self, task: asyncio.Task) -> None:
        # Runs before any waiter resumes; a failed attempt is forgotten here
        # and its exception retrieved even when every waiter was cancelled.
        if self._pending is task:
            self._pending = None
        if not task.cancelled() and task.exception() is not None:
            logger.warning(f"MongoDB connection attempt failed: {task.exception()}")

    async def _connect(self) -> AsyncIOMotorDatabase:
        logger.info(f"Connecting to MongoDB database '{self.database_name}'")
        client = AsyncIOMotorClient(
            self.mongodb_uri,
            serverSelectionTimeoutMS=self.timeout_ms,
        )
        try:
            await client.admin.command("ping")
        except Exception:
            client.close()
            raise

        self._client = client
        self._database = client[self.database_name]
        logger.info("MongoDB connected")
        return self._database

    async def close(self) -> None:
        """Close the client and forget the cached handle."""
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._database = None


def get_connection_cache(request: Request) -> ConnectionCache:
    """
    Dependency for FastAPI to provide the application's connection cache.

    The cache is handed out unconnected so that connection failures surface
    inside the route handler, where they are logged and answered.
    """
    return request.app.state.connection_cache
