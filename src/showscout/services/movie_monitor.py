"""Check movie pages for venues and notify when booking opens."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from showscout.catalog import MonitoredMovie, identify_movie
from showscout.config import settings
from showscout.extraction import DEFAULT_CONFIG, VenueExtractor, VenueRecord
from showscout.extraction.times import sorted_showtimes
from showscout.services.messages import format_error_message, format_notification
from showscout.services.page_fetcher import PageFetcher, PageSnapshot
from showscout.services.status import BOOKING_AVAILABLE, determine_status
from showscout.services.telegram_client import TelegramClient
from showscout.services.url_analysis import MovieUrl, analyze_url

logger = logging.getLogger(__name__)

# Terms logged for diagnostics when a page yields few venues
DIAGNOSTIC_KEYWORDS = ("theatre", "cinema", "pvr", "inox", "multiplex")


@dataclass
class MovieReport:
    """Outcome of checking one movie page."""

    url: str
    url_info: MovieUrl
    movie_title: str
    release_date: str | None
    status: str
    venues: list[VenueRecord] = field(default_factory=list)
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    previous_status: str | None = None

    @property
    def is_status_change(self) -> bool:
        return self.previous_status is not None and self.previous_status != self.status


class MovieMonitor:
    """
    Tracks movie pages between checks and sends Telegram notifications.

    The last report per URL is kept in memory so status changes can be
    detected. A notification goes out whenever venues are listed and the
    status changed, the page is checked for the first time, or booking is
    available.
    """

    def __init__(
        self,
        telegram: TelegramClient | None = None,
        extractor: VenueExtractor | None = None,
        fetcher_factory: Callable[[], PageFetcher] = PageFetcher,
    ) -> None:
        self.telegram = telegram or TelegramClient()
        self.extractor = extractor or VenueExtractor(
            replace(DEFAULT_CONFIG, low_count_threshold=settings.low_count_threshold)
        )
        self.fetcher_factory = fetcher_factory
        self.last_reports: dict[str, MovieReport] = {}

    async def analyze_movie_page(self, url: str) -> MovieReport:
        """
        Load a movie page and extract its venues and booking status.

        Args:
            url: Movie page URL

        Returns:
            MovieReport for the page (not yet compared with earlier checks)
        """
        url_info = analyze_url(url)
        logger.info(f"Analyzing movie page: {url} (URL type: {url_info.url_type})")

        async with self.fetcher_factory() as fetcher:
            snapshot = await fetcher.load(url)
            venues = self.extractor.extract_venues(snapshot.body_text)
            self._log_extraction_diagnostics(snapshot, venues)

            if self.extractor.needs_supplement(venues):
                augmented_text = await fetcher.fetch_augmented_text()
                venues = self.extractor.supplement(venues, snapshot.body_text, augmented_text)

        status = determine_status(url_info, snapshot, len(venues))
        logger.info(
            f"{snapshot.movie_title}: status {status}, {len(venues)} theatres, "
            f"release date {snapshot.release_date or 'not specified'}"
        )

        return MovieReport(
            url=url,
            url_info=url_info,
            movie_title=snapshot.movie_title,
            release_date=snapshot.release_date,
            status=status,
            venues=venues,
        )

    async def check_movie(self, url: str) -> MovieReport:
        """
        Check a movie page, notify if warranted and remember the result.

        Raises:
            Whatever page loading or Telegram delivery raised
        """
        report = await self.analyze_movie_page(url)
        last = self.last_reports.get(url)
        report.previous_status = last.status if last else None

        if report.is_status_change:
            logger.info(f"STATUS CHANGE: {report.previous_status} -> {report.status}")

        if self.should_notify(report, last):
            logger.info("Sending Telegram notification for theatre availability")
            await self.notify(report)
        elif not report.venues:
            logger.info("No theatres found yet - waiting for booking to open (no notification sent)")

        self._log_results(report)
        self.last_reports[url] = report
        return report

    @staticmethod
    def should_notify(report: MovieReport, last: MovieReport | None) -> bool:
        if not report.venues:
            return False
        return report.is_status_change or last is None or report.status == BOOKING_AVAILABLE

    async def notify(self, report: MovieReport) -> None:
        movie = identify_movie(report.url)
        message = format_notification(
            movie_title=report.movie_title,
            page_url=report.url,
            status=report.status,
            venues=report.venues,
            checked_at=report.checked_at,
            movie=movie,
            is_status_change=report.is_status_change,
        )
        await self.telegram.send_message(message)

    async def run_single(self, url: str) -> MovieReport | None:
        """
        Check one movie, reporting failures to Telegram.

        Returns:
            The report, or None if the check failed
        """
        try:
            return await self.check_movie(url)
        except Exception as e:
            logger.error(f"Error processing movie {url}: {e}", exc_info=True)
            try:
                await self.telegram.send_message(
                    format_error_message(url, e, datetime.now(timezone.utc))
                )
            except Exception as telegram_error:
                logger.error(f"Failed to send error notification: {telegram_error}")
            return None

    async def run_cycle(self, movies: tuple[MonitoredMovie, ...] | list[MonitoredMovie]) -> int:
        """
        Check every movie in turn. A failure on one movie does not stop the rest.

        Returns:
            Number of movies checked successfully
        """
        logger.info(f"Starting multi-movie check cycle for {len(movies)} movies")
        successes = 0

        for position, movie in enumerate(movies, start=1):
            logger.info(f"{movie.emoji} Checking {movie.name} ({position}/{len(movies)})")
            try:
                await self.check_movie(movie.url)
                successes += 1
            except Exception as e:
                logger.error(f"Error checking {movie.name}: {e}", exc_info=True)

            if position < len(movies):
                await asyncio.sleep(settings.movie_delay_seconds)

        logger.info(f"Multi-movie check cycle completed: {successes}/{len(movies)} succeeded")
        return successes

    def _log_extraction_diagnostics(self, snapshot: PageSnapshot, venues: list[VenueRecord]) -> None:
        text = snapshot.body_text
        lowered = text.lower()
        logger.debug(f"Total page lines: {len(text.splitlines())}")
        logger.debug(f"Theatres found: {len(venues)}")
        if venues:
            logger.debug(f"Sample theatres: {', '.join(v.name for v in venues[:3])}")

        found_keywords = [keyword for keyword in DIAGNOSTIC_KEYWORDS if keyword in lowered]
        logger.debug(f"Theatre keywords found in page: {', '.join(found_keywords)}")
        logger.debug(f"Time patterns found: {len(self.extractor.config.time_pattern.findall(text))}")

        targets = [
            " ".join(entry)
            for entry in self.extractor.config.target_venues
            if all(term in lowered for term in entry)
        ]
        if targets:
            logger.debug(f"Target theatres found in page: {', '.join(targets)}")
        else:
            logger.debug("Target theatres not found in page content")

    @staticmethod
    def _log_results(report: MovieReport) -> None:
        if not report.venues:
            logger.info(f"{report.movie_title}: still waiting for theatres to start showing")
            return

        logger.info("Theatre results (where the movie is playing):")
        for index, venue in enumerate(report.venues, start=1):
            logger.info(f"{index}. {venue.name} - {', '.join(sorted_showtimes(venue.showtimes))}")
        logger.info(f"Movie is now showing in {len(report.venues)} theatres")
