"""Health check endpoint."""

from fastapi import APIRouter, Depends

from filmshelf.database import ConnectionCache, get_connection_cache

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check(
    connection: ConnectionCache = Depends(get_connection_cache),
) -> dict[str, str]:
    """
    Health check endpoint.

    Does not trigger a connection attempt.

    Returns:
        Status message and whether the film database is connected
    """
    return {
        "status": "ok",
        "database": "connected" if connection.is_connected else "disconnected",
    }
