"""BookMyShow movie URL analysis."""

import re
from dataclasses import dataclass

from showscout.utils.text import movie_name_from_slug

COMING_SOON = "coming-soon"
RELEASED = "released"
UNKNOWN = "unknown"


@dataclass(frozen=True)
class MovieUrl:
    """What a movie URL tells us before the page is loaded."""

    original_url: str
    movie_code: str | None  # e.g. "ET00395817"
    release_date: str | None  # YYYYMMDD segment of booking URLs
    url_type: str  # COMING_SOON, RELEASED or UNKNOWN
    movie_name: str | None  # Display name derived from the URL slug


def analyze_url(url: str) -> MovieUrl:
    """
    Classify a movie URL and pull out its identifiers.

    Booking URLs look like
    ``https://in.bookmyshow.com/movies/hyderabad/war-2/buytickets/ET00356501/20250814``;
    coming-soon pages carry ``?type=coming-soon``.

    Args:
        url: Movie page URL

    Returns:
        MovieUrl with whatever could be parsed (missing parts are None)
    """
    code_match = re.search(r"ET\d+", url)
    date_match = re.search(r"(\d{8})(?:\D|$)", url)

    if "?type=coming-soon" in url:
        url_type = COMING_SOON
    elif "/buytickets/" in url and date_match:
        url_type = RELEASED
    else:
        url_type = UNKNOWN

    return MovieUrl(
        original_url=url,
        movie_code=code_match.group(0) if code_match else None,
        release_date=date_match.group(1) if date_match else None,
        url_type=url_type,
        movie_name=extract_movie_name(url),
    )


def extract_movie_name(url: str) -> str | None:
    """Title-cased movie name from the ``/movies/<city>/<slug>/`` path, if present."""
    match = re.search(r"/movies/[^/]+/([^/]+)/", url)
    return movie_name_from_slug(match.group(1)) if match else None
