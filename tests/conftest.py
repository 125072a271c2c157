"""Shared test fixtures."""

import pytest
from fastapi import FastAPI

from showscout.api.routes import extract, health, movies


@pytest.fixture
def test_app() -> FastAPI:
    """Minimal FastAPI app without the APScheduler lifespan, for API tests."""
    app = FastAPI()
    app.include_router(health.router)
    app.include_router(extract.router, prefix="/api")
    app.include_router(movies.router, prefix="/api")
    return app
