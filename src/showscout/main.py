"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from functools import partial

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from fastapi import FastAPI

from showscout.api.routes import extract, health, movies
from showscout.catalog import CATALOG
from showscout.config import settings
from showscout.services.movie_monitor import MovieMonitor
from showscout.tasks.monitor_job import schedule_monitoring

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: monitor the catalog if Telegram delivery is configured
    scheduler = AsyncIOScheduler()
    try:
        settings.validate_telegram()
    except ValueError as e:
        logger.warning(f"Movie monitoring disabled: {e}")
        app.state.monitor = None
    else:
        monitor = MovieMonitor()
        app.state.monitor = monitor
        schedule_monitoring(scheduler, partial(monitor.run_cycle, CATALOG))
        scheduler.start()
        logger.info(f"Scheduler started - monitoring {len(CATALOG)} movies")

    yield

    # Shutdown: stop the scheduler gracefully
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler shut down")


# Create FastAPI app
app = FastAPI(
    title="ShowScout API",
    description="Venue and showtime extraction for movie booking pages",
    version="0.1.0",
    lifespan=lifespan,
)

# Include routers
app.include_router(health.router)
app.include_router(extract.router, prefix="/api", tags=["extract"])
app.include_router(movies.router, prefix="/api", tags=["movies"])
