"""Pattern tables and tuning values for venue extraction.

The tables describe one market (Hyderabad listings on BookMyShow). Build a
different ``ExtractionConfig`` to point the engine at another market; the
engine itself never reads module globals.
"""

import re
from dataclasses import dataclass

# Venue keywords: chain names, format tags and local landmarks/localities
VENUE_KEYWORDS = (
    "cinema",
    "multiplex",
    "mall",
    "theatre",
    "pvr",
    "inox",
    "miraj",
    "asian",
    "aparna",
    "amb",
    "gpr",
    "cinemax",
    "cinepolis",
    "carnival",
    # Local/specific theatres
    "vyjayanthi",
    "uk cineplex",
    "uk",
    "cineplex",
    "sandhya",
    "sudarshan",
    "talluri",
    "nacharam",
    "kushaiguda",
    "rtc x roads",
    "35mm",
    "dolby atmos",
    "laser",
    # AMR Planet Mall area
    "amr",
    "planet mall",
    "moula ali",
    "ecil",
    "secunderabad",
)

# Keywords that anchor the "<name><separator>" prefix patterns
CHAIN_KEYWORDS = (
    "cinema",
    "multiplex",
    "mall",
    "theatre",
    "pvr",
    "inox",
    "miraj",
    "asian",
    "aparna",
    "amb",
    "gpr",
    "cinemax",
    "cinepolis",
    "carnival",
)

GENERIC_VENUE_WORDS = ("cinema", "theatre", "theatres")

# Regex fragments for venues we always want named in full
NAMED_VENUES = (r"vyjayanthi", r"uk\s*cineplex")

LOCALITIES = (
    "hyderabad",
    "nacharam",
    "kushaiguda",
    "secunderabad",
    "moula ali",
    "ecil",
)

# Localities that follow a colon in "Name: Locality" lines
COLON_LOCALITIES = ("hyderabad", "nacharam", "kushaiguda", "rtc")

EXCLUDE_PATTERNS = (
    re.compile(r"movies?\s+in\s+", re.IGNORECASE),
    re.compile(r"dolby\s+cinema", re.IGNORECASE),
    re.compile(r"top\s+cinema", re.IGNORECASE),
    re.compile(r"cinema\s+chain", re.IGNORECASE),
    re.compile(r"part\s+\d+", re.IGNORECASE),
    re.compile(r"sword\s+vs\s+spirit", re.IGNORECASE),
    re.compile(r"hari\s+hara\s+veera", re.IGNORECASE),
    re.compile(r"^\d+d$", re.IGNORECASE),
    re.compile(r"connplex|gold\s+cinema$", re.IGNORECASE),
    re.compile(r"^(pvr|inox|cinepolis|miraj\s+cinemas|asian\s+cinemas)$", re.IGNORECASE),
)

# Each entry is a set of terms that must all appear in a line
TARGET_VENUES = (("vyjayanthi",), ("uk", "cineplex"))

TIME_PATTERN = re.compile(r"\d{1,2}:\d{2}\s*(?:am|pm)", re.IGNORECASE)

SCREEN_FORMAT_PATTERN = re.compile(r"\d+(mm|k)\s*(dolby|atmos|laser)", re.IGNORECASE)
FORMAT_TAG_PATTERN = re.compile(r"\d+(mm|k)", re.IGNORECASE)

URL_MARKER = "http"
SELECT_MARKER = "Select"


@dataclass(frozen=True)
class ExtractionConfig:
    """Static tables and window sizes consumed by the extraction engine."""

    venue_keywords: tuple[str, ...] = VENUE_KEYWORDS
    chain_keywords: tuple[str, ...] = CHAIN_KEYWORDS
    generic_venue_words: tuple[str, ...] = GENERIC_VENUE_WORDS
    named_venues: tuple[str, ...] = NAMED_VENUES
    localities: tuple[str, ...] = LOCALITIES
    colon_localities: tuple[str, ...] = COLON_LOCALITIES
    exclude_patterns: tuple[re.Pattern, ...] = EXCLUDE_PATTERNS
    target_venues: tuple[tuple[str, ...], ...] = TARGET_VENUES
    time_pattern: re.Pattern = TIME_PATTERN

    # Line classifier bounds (exclusive)
    min_line_length: int = 5
    max_line_length: int = 200

    # Time extractor windows
    backward_margin: int = 5
    forward_range: int = 15
    secondary_forward_range: int = 8
    secondary_max_line_length: int = 50

    # Name refiner
    refine_radius: int = 2
    refine_max_length: int = 100

    # Keyword + time co-occurrence strategy (exclusive bounds)
    co_occurrence_min_length: int = 10
    co_occurrence_max_length: int = 150

    # Alternative pass (inclusive bounds)
    alternative_min_length: int = 8
    alternative_max_length: int = 300
    alternative_backward_margin: int = 5
    alternative_forward_range: int = 10

    # Accepted names must be strictly between these lengths
    min_name_length: int = 3
    max_name_length: int = 100

    # Fewer records than this triggers the fallback strategies
    low_count_threshold: int = 10

    def has_keyword(self, line: str) -> bool:
        lowered = line.lower()
        return any(keyword in lowered for keyword in self.venue_keywords)

    def has_locality(self, line: str) -> bool:
        lowered = line.lower()
        return any(locality in lowered for locality in self.localities)

    def is_excluded(self, line: str) -> bool:
        return any(pattern.search(line) for pattern in self.exclude_patterns)

    def target_venue_terms(self) -> tuple[str, ...]:
        """Every individual term that appears in a target venue entry."""
        terms: list[str] = []
        for entry in self.target_venues:
            for term in entry:
                if term not in terms:
                    terms.append(term)
        return tuple(terms)

    def mentions_target_venue(self, line: str) -> bool:
        lowered = line.lower()
        return any(all(term in lowered for term in entry) for entry in self.target_venues)


DEFAULT_CONFIG = ExtractionConfig()
