"""Health check endpoint."""

from fastapi import APIRouter, Depends

from showscout.api.routes.movies import get_monitor
from showscout.services.movie_monitor import MovieMonitor

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check(
    monitor: MovieMonitor | None = Depends(get_monitor),
) -> dict[str, str]:
    """
    Report that the API is up and whether movie monitoring is running.

    Returns:
        Status plus "enabled" or "disabled" for the background monitor
    """
    return {"status": "ok", "monitoring": "enabled" if monitor else "disabled"}
