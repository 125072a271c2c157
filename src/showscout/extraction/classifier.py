"""Heuristic classifier for lines that name a venue."""

import re

from showscout.extraction.patterns import (
    DEFAULT_CONFIG,
    FORMAT_TAG_PATTERN,
    SCREEN_FORMAT_PATTERN,
    SELECT_MARKER,
    URL_MARKER,
    ExtractionConfig,
)


def _has_venue_signal(line: str, config: ExtractionConfig) -> bool:
    """Keyword, screen format, "Cinema:" or ": Locality" in the line."""
    if config.has_keyword(line) or SCREEN_FORMAT_PATTERN.search(line):
        return True

    generic = "|".join(re.escape(word) for word in config.generic_venue_words)
    if re.search(rf"({generic})\s*:", line, re.IGNORECASE):
        return True

    localities = "|".join(re.escape(loc) for loc in config.colon_localities)
    return bool(re.search(rf":\s*({localities})", line, re.IGNORECASE))


def _has_listing_context(line: str, config: ExtractionConfig) -> bool:
    """Separator, locality, format tag or inline time in the line."""
    return (
        ":" in line
        or "," in line
        or " - " in line
        or config.has_locality(line)
        or bool(FORMAT_TAG_PATTERN.search(line))
        or bool(config.time_pattern.search(line))
    )


def is_venue_line(line: str, config: ExtractionConfig = DEFAULT_CONFIG) -> bool:
    """
    Decide whether a line plausibly names a venue.

    Recall is favoured over precision: lines that turn out to have no
    showtimes are dropped later. Exclusion patterns always win over
    inclusion signals.

    Args:
        line: A single trimmed page line
        config: Extraction tables

    Returns:
        True if the line looks like a venue name
    """
    if not (config.min_line_length < len(line) < config.max_line_length):
        return False
    if URL_MARKER in line or SELECT_MARKER in line:
        return False
    if re.fullmatch(r"\d+", line):
        return False
    if config.is_excluded(line):
        return False

    return _has_venue_signal(line, config) and _has_listing_context(line, config)
