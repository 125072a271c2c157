"""Merge venue candidates into a deduplicated, insertion-ordered record set."""

import logging
from collections import OrderedDict
from collections.abc import Iterable

from showscout.extraction.models import VenueRecord
from showscout.utils.text import normalise_venue_key

logger = logging.getLogger(__name__)


class VenueMap:
    """
    Insertion-ordered map from normalised venue key to record.

    Records whose names normalise to the same key are the same venue:
    their showtimes are unioned and the strictly longer name is kept, so
    the first name seen wins a tie.
    """

    def __init__(self) -> None:
        self._records: OrderedDict[str, VenueRecord] = OrderedDict()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: str) -> bool:
        return normalise_venue_key(name) in self._records

    def add(self, name: str, showtimes: set[str]) -> None:
        """Insert a venue or merge it into the record with the same key."""
        if not showtimes:
            return

        key = normalise_venue_key(name)
        existing = self._records.get(key)
        if existing is None:
            self._records[key] = VenueRecord(name=name, showtimes=set(showtimes))
            return

        existing.showtimes |= showtimes
        if len(name) > len(existing.name):
            logger.debug(f"Renaming venue '{existing.name}' -> '{name}'")
            existing.name = name

    def add_if_absent(self, name: str, showtimes: set[str]) -> bool:
        """Insert a venue only if its key is new. Returns True if inserted."""
        if not showtimes or name in self:
            return False
        self._records[normalise_venue_key(name)] = VenueRecord(name=name, showtimes=set(showtimes))
        return True

    def records(self) -> list[VenueRecord]:
        return list(self._records.values())


def reconcile(
    entries: Iterable[tuple[str, set[str]]],
    venue_map: VenueMap | None = None,
) -> VenueMap:
    """
    Fold (refined name, showtimes) pairs into a VenueMap in arrival order.

    Args:
        entries: Candidate names with their extracted showtimes
        venue_map: Map to merge into (a new one when omitted)

    Returns:
        The populated map
    """
    if venue_map is None:
        venue_map = VenueMap()
    for name, showtimes in entries:
        venue_map.add(name, showtimes)
    return venue_map


def _overlaps(a: str, b: str) -> bool:
    a_lower = a.lower()
    b_lower = b.lower()
    return a_lower in b_lower or b_lower in a_lower


def merge_by_containment(
    primary: list[VenueRecord],
    additions: Iterable[VenueRecord],
) -> list[VenueRecord]:
    """
    Append supplementary records whose names do not overlap existing ones.

    A new record is dropped when its name contains, or is contained in, the
    name of any record already kept (case-insensitive). Dropped records do
    not contribute their showtimes.

    Args:
        primary: Records from the primary pass
        additions: Records from supplementary passes, in priority order

    Returns:
        New list with the primary records followed by the accepted additions
    """
    merged = list(primary)
    for record in additions:
        if any(_overlaps(existing.name, record.name) for existing in merged):
            logger.debug(f"Dropping overlapping venue '{record.name}'")
            continue
        merged.append(record)
    return merged
