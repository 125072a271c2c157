"""Pick the most descriptive label for a venue from neighbouring lines."""

import re

from showscout.extraction.patterns import DEFAULT_CONFIG, URL_MARKER, ExtractionConfig
from showscout.extraction.times import mask_time_tokens


def refine_name(
    lines: list[str],
    index: int,
    raw_name: str,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> str:
    """
    Replace a raw venue name with a fuller label found nearby.

    Venue pages often repeat the name with its locality ("PVR: Nexus Mall,
    Kukatpally") on an adjacent line. The first line in the window that is
    longer than ``raw_name``, overlaps it case-insensitively and carries a
    colon or comma wins. Colons inside time tokens do not count.

    Args:
        lines: Page lines
        index: Index of the line the raw name came from
        raw_name: Name produced by candidate generation
        config: Extraction tables

    Returns:
        The refined name, or ``raw_name`` if nothing better was found
    """
    start = max(0, index - config.refine_radius)
    end = min(index + config.refine_radius + 1, len(lines))
    raw_lower = raw_name.lower()

    for i in range(start, end):
        context = lines[i].strip()
        context_lower = context.lower()
        if not (len(raw_name) < len(context) < config.refine_max_length):
            continue
        if raw_lower not in context_lower and context_lower not in raw_lower:
            continue
        if re.fullmatch(r"\d+", context) or URL_MARKER in context:
            continue

        separators = mask_time_tokens(context, config)
        if ":" in separators or "," in separators:
            return context

    return raw_name
