"""Showtime token extraction."""

import re

from showscout.extraction.patterns import DEFAULT_CONFIG, SELECT_MARKER, URL_MARKER, ExtractionConfig


def find_time_tokens(line: str, config: ExtractionConfig = DEFAULT_CONFIG) -> list[str]:
    """Return every time token in a line, in order of appearance.

    Whole matches are returned, so a table pattern may use groups.
    """
    return [match.group(0) for match in config.time_pattern.finditer(line)]


def showtime_window(
    center: int,
    line_count: int,
    forward_range: int,
    backward_margin: int,
) -> tuple[int, int]:
    """Clip ``[center - backward_margin, center + forward_range)`` to the line range."""
    return max(0, center - backward_margin), min(center + forward_range, line_count)


def extract_times(
    lines: list[str],
    center: int,
    forward_range: int | None = None,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> set[str]:
    """
    Collect showtimes listed around a candidate venue line.

    Showtimes normally follow the venue name, so the window reaches a
    little behind ``center`` and much further ahead. The candidate line is
    always scanned for inline times, and a short forward scan picks up time
    rows while skipping lines that look like headings or links.

    Args:
        lines: Page lines
        center: Index of the candidate venue line
        forward_range: Lines to scan ahead (config default when omitted)
        config: Extraction tables

    Returns:
        Set of time tokens as matched; empty when none were found
    """
    if forward_range is None:
        forward_range = config.forward_range

    showtimes: set[str] = set()

    start, end = showtime_window(center, len(lines), forward_range, config.backward_margin)
    for i in range(start, end):
        showtimes.update(find_time_tokens(lines[i], config))

    # Times listed inline with the venue name
    if 0 <= center < len(lines):
        showtimes.update(find_time_tokens(lines[center], config))

    for i in range(center + 1, min(center + config.secondary_forward_range, len(lines))):
        line = lines[i]
        if (
            len(line) > config.secondary_max_line_length
            or URL_MARKER in line
            or SELECT_MARKER in line
        ):
            continue
        showtimes.update(find_time_tokens(line, config))

    return showtimes


def mask_time_tokens(line: str, config: ExtractionConfig = DEFAULT_CONFIG) -> str:
    """Blank out time tokens so their colons are not mistaken for separators."""
    return config.time_pattern.sub(" ", line)


def time_sort_key(token: str) -> tuple[int, int]:
    """
    Sort key placing 12-hour time tokens in clock order.

    Examples:
        "12:15 AM" → (0, 15)
        "2:30 pm" → (14, 30)
    """
    match = re.match(r"\s*(\d{1,2}):(\d{2})\s*(am|pm)", token, re.IGNORECASE)
    if not match:
        return (24, 0)

    hour = int(match.group(1))
    minute = int(match.group(2))
    meridiem = match.group(3).lower()

    if meridiem == "pm" and hour != 12:
        hour += 12
    elif meridiem == "am" and hour == 12:
        hour = 0

    return (hour, minute)


def sorted_showtimes(showtimes: set[str]) -> list[str]:
    """Showtimes in clock order, ties broken by token text."""
    return sorted(showtimes, key=lambda token: (time_sort_key(token), token))
