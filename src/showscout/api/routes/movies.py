"""Monitored movie endpoints."""

from fastapi import APIRouter, Depends, Request

from showscout.catalog import CATALOG
from showscout.schemas.movie import MovieStatusResponse
from showscout.services.movie_monitor import MovieMonitor

router = APIRouter()


def get_monitor(request: Request) -> MovieMonitor | None:
    """The monitor started by the application lifespan, if any."""
    return getattr(request.app.state, "monitor", None)


@router.get("/movies", response_model=list[MovieStatusResponse])
async def get_movies(
    monitor: MovieMonitor | None = Depends(get_monitor),
) -> list[MovieStatusResponse]:
    """
    List catalog movies with their latest known status.

    Args:
        monitor: Running monitor (None when monitoring is disabled)

    Returns:
        One entry per catalog movie
    """
    movies: list[MovieStatusResponse] = []
    for movie in CATALOG:
        report = monitor.last_reports.get(movie.url) if monitor else None
        movies.append(
            MovieStatusResponse(
                name=movie.name,
                url=movie.url,
                emoji=movie.emoji,
                release_date=movie.release_date,
                status=report.status if report else None,
                venue_count=len(report.venues) if report else 0,
                last_checked=report.checked_at if report else None,
            )
        )
    return movies
