"""Venue extraction endpoint."""

from fastapi import APIRouter

from showscout.extraction import VenueRecord, extract_venues, extract_with_fallback
from showscout.extraction.times import sorted_showtimes
from showscout.schemas.venue import ExtractRequest, ExtractResponse, VenueResponse

router = APIRouter()


def to_venue_response(record: VenueRecord) -> VenueResponse:
    return VenueResponse(name=record.name, showtimes=sorted_showtimes(record.showtimes))


@router.post("/extract", response_model=ExtractResponse)
async def extract(request: ExtractRequest) -> ExtractResponse:
    """
    Extract venues and showtimes from page text.

    Args:
        request: Page text, optional augmented text and fallback flag

    Returns:
        Venues found, in the order they first appear
    """
    if request.use_fallback:
        venues = extract_with_fallback(request.text, request.augmented_text)
    else:
        venues = extract_venues(request.text)

    return ExtractResponse(
        count=len(venues),
        venues=[to_venue_response(venue) for venue in venues],
    )
