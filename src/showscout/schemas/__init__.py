"""Pydantic schemas for API requests and responses."""

from showscout.schemas.movie import MovieStatusResponse
from showscout.schemas.venue import ExtractRequest, ExtractResponse, VenueResponse

__all__ = [
    "ExtractRequest",
    "ExtractResponse",
    "MovieStatusResponse",
    "VenueResponse",
]
