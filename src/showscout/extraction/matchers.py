"""Ordered prefix matchers that pull a venue name off the start of a line."""

import re
from dataclasses import dataclass

from showscout.extraction.patterns import DEFAULT_CONFIG, ExtractionConfig

# A colon that ends a name rather than splitting hours from minutes
NAME_COLON = r":(?!\d{2}\s*(?:am|pm))"


@dataclass(frozen=True)
class PrefixMatcher:
    """A named pattern whose first group captures the venue name."""

    name: str
    pattern: re.Pattern

    def try_match(self, line: str) -> str | None:
        """Return the captured venue name, or None if the line does not match."""
        match = self.pattern.match(line)
        if not match:
            return None
        captured = match.group(1).strip()
        return captured or None


def _alternation(words: tuple[str, ...]) -> str:
    return "|".join(re.escape(word) for word in words)


def build_prefix_matchers(config: ExtractionConfig = DEFAULT_CONFIG) -> list[PrefixMatcher]:
    """
    Build the prefix matchers in precedence order.

    Named local venues come first, then keyword and locality anchored
    patterns, then generic separator patterns. The first matcher that fits
    a line decides its name, so the order must not change.
    """
    chains = _alternation(config.chain_keywords)
    localities = _alternation(config.localities)
    generic = _alternation(config.generic_venue_words)

    entries: list[tuple[str, str]] = [
        (f"named:{venue}", rf"^([^:]*{venue}[^:]*){NAME_COLON}")
        for venue in config.named_venues
    ]
    entries += [
        ("keyword-colon", rf"^([^:]+(?:{chains})[^:]*){NAME_COLON}"),
        ("locality-colon", rf"^([^:]+(?:{localities})[^:]*){NAME_COLON}"),
        ("generic-colon", rf"^([^:]+(?:{generic})[^:]*){NAME_COLON}"),
        ("colon-then-time", r"^([^:]+):\s*\d{1,2}:\d{2}\s*(?:am|pm)"),
        ("keyword-dash", rf"^([^-]+(?:{chains})[^-]*)-"),
        ("keyword-dot", rf"^([^.]+(?:{chains})[^.]*)\."),
        ("keyword-paren", rf"^([^(]+(?:{chains})[^(]*)"),
    ]

    return [PrefixMatcher(name, re.compile(regex, re.IGNORECASE)) for name, regex in entries]


def match_prefix(line: str, matchers: list[PrefixMatcher]) -> tuple[str, str] | None:
    """
    Try each matcher in order.

    Returns:
        (matcher name, venue name) for the first match, or None
    """
    for matcher in matchers:
        venue_name = matcher.try_match(line)
        if venue_name:
            return matcher.name, venue_name
    return None
