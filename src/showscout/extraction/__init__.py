"""Venue and showtime extraction engine."""

from showscout.extraction.engine import (
    VenueExtractor,
    extract_venues,
    extract_venues_alternative,
    extract_with_fallback,
)
from showscout.extraction.models import VenueCandidate, VenueRecord
from showscout.extraction.patterns import DEFAULT_CONFIG, ExtractionConfig

__all__ = [
    "DEFAULT_CONFIG",
    "ExtractionConfig",
    "VenueCandidate",
    "VenueExtractor",
    "VenueRecord",
    "extract_venues",
    "extract_venues_alternative",
    "extract_with_fallback",
]
