"""Telegram message templates for movie reports."""

from datetime import datetime
from zoneinfo import ZoneInfo

from showscout.catalog import MonitoredMovie
from showscout.extraction.models import VenueRecord
from showscout.extraction.times import sorted_showtimes
from showscout.services.status import BOOKING_AVAILABLE

IST = ZoneInfo("Asia/Kolkata")

DEFAULT_CALL_TO_ACTION = "🍿 Don't miss out - grab your tickets now!"


def format_checked_at(moment: datetime) -> str:
    """Render a timestamp in Indian Standard Time, e.g. "14/08/2025, 09:30:00 AM"."""
    return moment.astimezone(IST).strftime("%d/%m/%Y, %I:%M:%S %p")


def format_venue_lines(venues: list[VenueRecord]) -> str:
    """Numbered venue list with showtimes in clock order."""
    return "".join(
        f"{index}. 🎭 *{venue.name}*\n   ⏰ {', '.join(sorted_showtimes(venue.showtimes))}\n\n"
        for index, venue in enumerate(venues, start=1)
    )


def format_notification(
    movie_title: str,
    page_url: str,
    status: str,
    venues: list[VenueRecord],
    checked_at: datetime,
    movie: MonitoredMovie | None = None,
    is_status_change: bool = False,
) -> str:
    """
    Build the Telegram message for one movie check.

    Catalog movies get their own headline and call to action when their
    status has just changed.

    Args:
        movie_title: Title shown on the page
        page_url: Movie page URL
        status: Booking status
        venues: Venues with showtimes
        checked_at: When the page was checked (timezone-aware)
        movie: Catalog entry for the page, if any
        is_status_change: Whether the status differs from the previous check

    Returns:
        Markdown message text
    """
    celebrate = is_status_change and movie is not None

    if status == BOOKING_AVAILABLE and venues:
        if celebrate and movie.headline:
            message = movie.headline.format(count=len(venues))
        else:
            message = (
                f"🎬 *{movie_title}* 🎉\n\n🎭 Now showing in {len(venues)} theatres!\n\n"
                "🎪 *THEATRES & SHOWTIMES:*\n\n"
            )
        message += format_venue_lines(venues)
        if celebrate:
            message += movie.call_to_action or DEFAULT_CALL_TO_ACTION
            message += "\n"
    else:
        message = f"❓ *{movie_title}* - Status Unknown\n\n🔍 Unable to determine booking status\n"

    message += f"🔗 [Movie Page]({page_url})\n"
    message += f"⏰ Last checked: {format_checked_at(checked_at)}"

    if venues:
        message += f"\n📊 Total theatres: {len(venues)}"

    return message


def format_error_message(page_url: str, error: Exception, checked_at: datetime) -> str:
    """Message sent when checking a movie page fails."""
    return (
        f"🚨 *Smart Scraper Error*\n\nError: {error}\n\n"
        f"🔗 [Movie Page]({page_url})\n"
        f"Time: {format_checked_at(checked_at)}"
    )
