"""Pydantic schemas for venue extraction."""

from pydantic import BaseModel, Field


class ExtractRequest(BaseModel):
    """Page text to extract venues from."""

    text: str
    augmented_text: str | None = None  # Extra text gathered after expanding the page
    use_fallback: bool = False  # Run supplementary passes when few venues are found


class VenueResponse(BaseModel):
    """A venue and its showtimes in clock order."""

    name: str
    showtimes: list[str]


class ExtractResponse(BaseModel):
    """Extraction result."""

    count: int
    venues: list[VenueResponse] = Field(default_factory=list)
