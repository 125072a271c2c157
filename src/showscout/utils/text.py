"""Text utilities for venue name handling."""

import re


def split_lines(text: str) -> list[str]:
    """
    Split a block of page text into trimmed, non-empty lines.

    Line order is preserved; it is the only positional signal left once a
    page has been flattened to text.

    Args:
        text: Visible page text

    Returns:
        List of trimmed lines with blank lines removed
    """
    return [line.strip() for line in text.splitlines() if line.strip()]


def normalise_venue_key(name: str) -> str:
    """
    Reduce a venue name to a key used to detect duplicates.

    Lower-cases, drops everything that is not a letter, digit or whitespace,
    and collapses runs of whitespace.

    Examples:
        "PVR: Nexus Mall, Kukatpally" → "pvr nexus mall kukatpally"
        "INOX  GVK-One" → "inox gvkone"

    Args:
        name: Venue name as displayed

    Returns:
        Normalised key (never shown to users)
    """
    key = name.lower()
    key = re.sub(r"[^\w\s]|_", "", key)
    key = re.sub(r"\s+", " ", key)
    return key.strip()


def clean_venue_name(name: str) -> str:
    """
    Trim stray characters from the edges of a venue name.

    Leading characters up to the first letter are dropped, as are trailing
    characters other than letters, digits, whitespace, hyphens, dots and
    parentheses.

    Examples:
        "1. Sandhya 70MM: RTC X Roads -" → "Sandhya 70MM: RTC X Roads -"
        "** Vyjayanthi Theatre !!" → "Vyjayanthi Theatre"
    """
    name = re.sub(r"^[^a-zA-Z]*", "", name)
    name = re.sub(r"[^a-zA-Z0-9\s\-.()]*$", "", name)
    return name.strip()


def movie_name_from_slug(slug: str) -> str:
    """
    Convert a URL slug to a display name.

    Examples:
        "war-2" → "War 2"
        "coolie" → "Coolie"
    """
    name = slug.replace("-", " ")
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), name)
