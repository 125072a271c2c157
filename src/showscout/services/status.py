"""Booking status of a movie page."""

from showscout.services.page_fetcher import PageSnapshot
from showscout.services.url_analysis import COMING_SOON, RELEASED, MovieUrl

BOOKING_AVAILABLE = "BOOKING_AVAILABLE"
STATUS_COMING_SOON = "COMING_SOON"
STATUS_UNKNOWN = "UNKNOWN"


def determine_status(url_info: MovieUrl, snapshot: PageSnapshot, venue_count: int) -> str:
    """
    Decide the booking status from the URL, page markers and venues found.

    A released URL with venues is always bookable; otherwise coming-soon
    markers take priority over booking markers.
    """
    if url_info.url_type == RELEASED and venue_count > 0:
        return BOOKING_AVAILABLE
    if (
        url_info.url_type == COMING_SOON
        or snapshot.has_interested_button
        or snapshot.has_releasing_text
    ):
        return STATUS_COMING_SOON
    if snapshot.has_book_tickets_button or url_info.url_type == RELEASED:
        return BOOKING_AVAILABLE
    return STATUS_UNKNOWN
