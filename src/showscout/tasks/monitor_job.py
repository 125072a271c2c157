"""Scheduled movie monitoring jobs."""

import logging
from collections.abc import Awaitable, Callable
from datetime import datetime, timedelta, timezone

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.date import DateTrigger
from apscheduler.triggers.interval import IntervalTrigger

from showscout.config import settings

logger = logging.getLogger(__name__)

MONITOR_JOB_ID = "movie_monitor"
RETRY_JOB_ID = "movie_monitor_retry"


async def run_monitor_job(
    scheduler: AsyncIOScheduler,
    job: Callable[[], Awaitable[object]],
) -> None:
    """Run one monitoring pass, scheduling an early retry if it fails.

    A pass fails when it raises or returns None.
    """
    try:
        result = await job()
    except Exception as e:
        logger.error(f"Error in monitoring pass: {e}", exc_info=True)
        result = None

    if result is None:
        retry_at = datetime.now(timezone.utc) + timedelta(minutes=settings.retry_interval_minutes)
        scheduler.add_job(
            run_monitor_job,
            trigger=DateTrigger(run_date=retry_at),
            args=[scheduler, job],
            id=RETRY_JOB_ID,
            replace_existing=True,
        )
        logger.info(f"Retrying in {settings.retry_interval_minutes} minutes")
        return

    logger.info(f"Next check in {settings.check_interval_minutes} minutes")


def schedule_monitoring(
    scheduler: AsyncIOScheduler,
    job: Callable[[], Awaitable[object]],
    run_now: bool = True,
) -> None:
    """Register ``job`` to run every ``check_interval_minutes``.

    With ``run_now`` the first pass starts immediately.
    """
    # Passing next_run_time=None would add the job paused
    extra = {"next_run_time": datetime.now(timezone.utc)} if run_now else {}
    scheduler.add_job(
        run_monitor_job,
        trigger=IntervalTrigger(minutes=settings.check_interval_minutes),
        args=[scheduler, job],
        id=MONITOR_JOB_ID,
        name="Check monitored movie pages",
        replace_existing=True,
        **extra,
    )
    logger.info(f"Monitoring scheduled every {settings.check_interval_minutes} minutes")
