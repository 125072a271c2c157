"""Venue and showtime extraction from flattened page text."""

import logging

from showscout.extraction.classifier import is_venue_line
from showscout.extraction.matchers import PrefixMatcher, build_prefix_matchers, match_prefix
from showscout.extraction.models import VenueCandidate, VenueRecord
from showscout.extraction.patterns import DEFAULT_CONFIG, ExtractionConfig
from showscout.extraction.reconciler import VenueMap, merge_by_containment, reconcile
from showscout.extraction.refiner import refine_name
from showscout.extraction.times import extract_times, find_time_tokens, showtime_window
from showscout.utils.text import clean_venue_name, split_lines

logger = logging.getLogger(__name__)


class VenueExtractor:
    """
    Turns visible page text into venue records with showtimes.

    Candidate lines are found by three strategies in precedence order:
    1. Prefix matchers ("Name: times", "Name - ...", ...)
    2. The line classifier, using the whole line as the name
    3. Keyword + inline time co-occurrence, only when 1-2 found few venues

    Each candidate's showtimes come from a window of nearby lines; candidates
    without showtimes are dropped. Names are refined from neighbouring lines
    and merged on their normalised key.

    The extractor holds only read-only configuration, so one instance can
    serve any number of concurrent calls.
    """

    def __init__(self, config: ExtractionConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.matchers: list[PrefixMatcher] = build_prefix_matchers(config)

    def extract_venues(self, text: str) -> list[VenueRecord]:
        """
        Extract venues from page text.

        Args:
            text: Visible page text, one logical row per line

        Returns:
            Venue records in first-seen order (empty if none found)
        """
        lines = split_lines(text)
        candidates = self._structural_candidates(lines)

        venue_map = VenueMap()
        self._reconcile_candidates(lines, candidates, venue_map)
        logger.debug(
            f"Primary strategies: {len(candidates)} candidates -> {len(venue_map)} venues"
        )

        if len(venue_map) < self.config.low_count_threshold:
            claimed = {candidate.source_line_index for candidate in candidates}
            extra = self._co_occurrence_candidates(lines, claimed)
            self._reconcile_candidates(lines, extra, venue_map)
            logger.debug(f"Co-occurrence strategy: {len(extra)} candidates -> {len(venue_map)} venues")

        return venue_map.records()

    def extract_venues_alternative(self, text: str) -> list[VenueRecord]:
        """
        Looser extraction used to catch venues the primary pass missed.

        Any line carrying a venue keyword or a target venue term together
        with a time token yields the text before the first time as a name.
        A second scan looks for target venues without inline times and
        takes showtimes from a wider window around them. The first record
        for a key wins; later duplicates are ignored.

        Args:
            text: Visible page text

        Returns:
            Venue records in first-seen order
        """
        config = self.config
        lines = split_lines(text)
        venue_map = VenueMap()
        target_terms = config.target_venue_terms()

        for line in lines:
            if not (config.alternative_min_length <= len(line) <= config.alternative_max_length):
                continue

            lowered = line.lower()
            if not (config.has_keyword(line) or any(term in lowered for term in target_terms)):
                continue

            times = find_time_tokens(line, config)
            if not times:
                continue

            time_index = line.find(times[0])
            if time_index <= 0:
                continue

            name = clean_venue_name(line[:time_index].strip())
            if self._acceptable_name(name):
                venue_map.add_if_absent(name, set(times))

        for index, line in enumerate(lines):
            if not config.mentions_target_venue(line):
                continue

            showtimes = set(find_time_tokens(line, config))
            if not showtimes:
                start, end = showtime_window(
                    index,
                    len(lines),
                    config.alternative_forward_range,
                    config.alternative_backward_margin,
                )
                for i in range(start, end):
                    showtimes.update(find_time_tokens(lines[i], config))

            name = clean_venue_name(line)
            if showtimes and self._acceptable_name(name):
                venue_map.add_if_absent(name, showtimes)

        logger.debug(f"Alternative pass found {len(venue_map)} venues")
        return venue_map.records()

    def extract_with_fallback(
        self,
        text: str,
        augmented_text: str | None = None,
    ) -> list[VenueRecord]:
        """
        Run the primary pass and, if it finds few venues, the supplementary passes.

        When the primary pass yields fewer than ``low_count_threshold``
        venues, the primary pass is re-run over ``augmented_text`` (if the
        caller gathered extra content) and the alternative pass runs over
        the same source. Their records are appended only when their names
        do not overlap an existing name.

        Args:
            text: Visible page text
            augmented_text: Optional richer text gathered after expanding the page

        Returns:
            Merged venue records
        """
        venues = self.extract_venues(text)
        if not self.needs_supplement(venues):
            return venues
        return self.supplement(venues, text, augmented_text)

    def needs_supplement(self, venues: list[VenueRecord]) -> bool:
        """True when a pass found fewer venues than the low-count threshold."""
        return len(venues) < self.config.low_count_threshold

    def supplement(
        self,
        venues: list[VenueRecord],
        text: str,
        augmented_text: str | None = None,
    ) -> list[VenueRecord]:
        """Merge supplementary passes into primary results by name containment."""
        logger.info(f"Only {len(venues)} venues found, running supplementary extraction")
        source = augmented_text if augmented_text is not None else text

        additions: list[VenueRecord] = []
        if augmented_text is not None:
            additions.extend(self.extract_venues(augmented_text))
        additions.extend(self.extract_venues_alternative(source))

        merged = merge_by_containment(venues, additions)
        logger.info(f"Total venues after supplementary extraction: {len(merged)}")
        return merged

    def _structural_candidates(self, lines: list[str]) -> list[VenueCandidate]:
        """Strategies 1 and 2: prefix matchers, then the line classifier."""
        candidates: list[VenueCandidate] = []
        for index, line in enumerate(lines):
            matched = match_prefix(line, self.matchers)
            if matched:
                raw_name = matched[1]
            elif is_venue_line(line, self.config):
                raw_name = line
            else:
                continue
            candidates.append(self._candidate(index, raw_name, len(lines)))
        return candidates

    def _co_occurrence_candidates(
        self,
        lines: list[str],
        claimed: set[int],
    ) -> list[VenueCandidate]:
        """Strategy 3: unclaimed lines with a venue keyword and an inline time."""
        config = self.config
        candidates: list[VenueCandidate] = []
        for index, line in enumerate(lines):
            if index in claimed:
                continue
            if not (config.co_occurrence_min_length < len(line) < config.co_occurrence_max_length):
                continue
            if not config.has_keyword(line):
                continue

            times = find_time_tokens(line, config)
            if not times:
                continue

            raw_name = line[: line.find(times[0])].strip()
            if len(raw_name) > config.min_name_length:
                candidates.append(self._candidate(index, raw_name, len(lines)))
        return candidates

    def _candidate(self, index: int, raw_name: str, line_count: int) -> VenueCandidate:
        start, end = showtime_window(
            index, line_count, self.config.forward_range, self.config.backward_margin
        )
        return VenueCandidate(
            source_line_index=index,
            raw_name=raw_name,
            window_start=start,
            window_end=end,
        )

    def _reconcile_candidates(
        self,
        lines: list[str],
        candidates: list[VenueCandidate],
        venue_map: VenueMap,
    ) -> None:
        entries: list[tuple[str, set[str]]] = []
        for candidate in candidates:
            showtimes = extract_times(lines, candidate.source_line_index, config=self.config)
            if not showtimes:
                continue
            name = refine_name(lines, candidate.source_line_index, candidate.raw_name, self.config)
            entries.append((name, showtimes))
        reconcile(entries, venue_map)

    def _acceptable_name(self, name: str) -> bool:
        return self.config.min_name_length < len(name) < self.config.max_name_length


_default_extractor = VenueExtractor()


def extract_venues(text: str) -> list[VenueRecord]:
    """Extract venues from page text using the default tables."""
    return _default_extractor.extract_venues(text)


def extract_venues_alternative(text: str) -> list[VenueRecord]:
    """Run the looser alternative pass using the default tables."""
    return _default_extractor.extract_venues_alternative(text)


def extract_with_fallback(text: str, augmented_text: str | None = None) -> list[VenueRecord]:
    """Primary pass plus supplementary passes when few venues were found."""
    return _default_extractor.extract_with_fallback(text, augmented_text)
