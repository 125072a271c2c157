"""Pydantic schemas for monitored movies."""

from datetime import datetime

from pydantic import BaseModel


class MovieStatusResponse(BaseModel):
    """A catalog movie with the outcome of its latest check."""

    name: str
    url: str
    emoji: str
    release_date: str
    status: str | None = None  # None until the first check completes
    venue_count: int = 0
    last_checked: datetime | None = None
