"""
Shared test fixtures.

Each test gets a fresh in-memory ``Registry``; API tests run the FastAPI
app through ``httpx.AsyncClient`` + ``ASGITransport`` so no server is
started.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from rideshare.api.app import create_app
from rideshare.api.middleware import limiter
from rideshare.domain.entities import Driver, Rider, UserIdentity
from rideshare.domain.pricing import FixedFare
from rideshare.domain.registry import Registry


@pytest.fixture
def registry() -> Registry:
    return Registry(fare_policy=FixedFare(25.0))


@pytest.fixture
def alice(registry: Registry) -> Rider:
    rider = Rider(UserIdentity("R1", "Alice", "555-123-4567"))
    registry.register_user(rider)
    return rider


@pytest.fixture
def bob(registry: Registry) -> Driver:
    driver = Driver(
        UserIdentity("D1", "Bob", "555-987-6543"),
        driver_id="DRV1",
        vehicle_details="Toyota Prius",
    )
    registry.register_user(driver)
    return driver


@pytest.fixture
def carol(registry: Registry) -> Driver:
    driver = Driver(
        UserIdentity("D2", "Carol", "555-222-3333"),
        driver_id="DRV2",
        vehicle_details="Honda Civic",
    )
    registry.register_user(driver)
    return driver


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient backed by an app with its own empty registry."""
    limiter.reset()
    app = create_app(registry=Registry(fare_policy=FixedFare(25.0)))

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
