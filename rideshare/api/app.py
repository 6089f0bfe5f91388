"""
FastAPI application factory.

* Registers routes for users, rides, drivers and admin.
* Owns one in-memory ``Registry`` per application (``app.state.registry``).
* Seeds demo data on startup when ``SEED_DEMO_DATA`` is set.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging
from typing import Optional

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from rideshare.api.middleware import limiter
from rideshare.api.routes import admin, drivers, rides, users
from rideshare.config import settings
from rideshare.domain.pricing import FixedFare
from rideshare.domain.registry import Registry
from rideshare.seed import seed_registry

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed the registry on startup if configured."""
    if settings.seed_demo_data:
        seed_registry(app.state.registry)
    logger.info("Ride-sharing service started")
    yield
    logger.info(
        "Ride-sharing service stopped (%d trips in memory discarded)",
        len(app.state.registry.list_all_trips()),
    )


def create_app(registry: Optional[Registry] = None) -> FastAPI:
    app = FastAPI(
        title="Ride Sharing Coordination API",
        description=(
            "Riders request trips, drivers accept and complete them, and "
            "a central in-memory registry tracks each trip's lifecycle "
            "and every user's ride history."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.registry = registry or Registry(
        fare_policy=FixedFare(settings.fixed_fare),
        currency_symbol=settings.currency_symbol,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(users.router, prefix="/api/v1")
    app.include_router(rides.router, prefix="/api/v1")
    app.include_router(drivers.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
