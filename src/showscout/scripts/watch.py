"""Watch movie booking pages and announce venues on Telegram."""

import argparse
import asyncio
import logging
import sys
from functools import partial

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from showscout.catalog import CATALOG
from showscout.config import settings
from showscout.services.movie_monitor import MovieMonitor
from showscout.tasks.monitor_job import schedule_monitoring

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Monitor movie pages and send Telegram alerts when theatres list showtimes."
    )
    parser.add_argument(
        "url",
        nargs="?",
        help="Movie page URL to monitor (default: every catalog movie)",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Monitor every catalog movie (the default when no URL is given)",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single check instead of monitoring continuously",
    )
    args = parser.parse_args(argv)
    if args.url and not args.url.startswith("http"):
        parser.error(f"not a movie URL: {args.url}")
    return args


async def watch(url: str | None, run_all: bool, once: bool) -> None:
    """Run the requested checks, once or on the configured interval."""
    monitor = MovieMonitor()

    if run_all or not url:
        logger.info(f"Monitoring {len(CATALOG)} movies:")
        for index, movie in enumerate(CATALOG, start=1):
            logger.info(f"{index}. {movie.emoji} {movie.name} - {movie.release_date}")
        job = partial(monitor.run_cycle, CATALOG)
    else:
        logger.info(f"Movie URL: {url}")
        job = partial(monitor.run_single, url)

    logger.info(f"Mode: {'Single Run' if once else 'Continuous Monitoring'}")

    if once:
        await job()
        logger.info("Single run completed")
        return

    scheduler = AsyncIOScheduler()
    schedule_monitoring(scheduler, job)
    scheduler.start()
    try:
        await asyncio.Event().wait()
    finally:
        scheduler.shutdown(wait=False)


def main() -> None:
    args = parse_args()

    try:
        settings.validate_telegram()
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(watch(args.url, args.all, args.once))
    except KeyboardInterrupt:
        logger.info("Stopped")


if __name__ == "__main__":
    main()
