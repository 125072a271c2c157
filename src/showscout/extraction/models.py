"""Data models for venue extraction."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class VenueCandidate:
    """
    A line hypothesised to name a venue.

    Produced while generating candidates and discarded once reconciled.
    """

    source_line_index: int
    raw_name: str
    window_start: int  # First line scanned for showtimes
    window_end: int  # One past the last line scanned for showtimes


@dataclass
class VenueRecord:
    """
    A venue and the showtimes listed for it.

    This is the output format of every extraction pass.
    """

    name: str  # Best human-readable label seen so far
    showtimes: set[str] = field(default_factory=set)  # Time tokens as they appear on the page

    def __post_init__(self) -> None:
        """Validate that the record carries at least one showtime."""
        if not self.showtimes:
            raise ValueError("showtimes must not be empty")
