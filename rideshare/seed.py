"""
Demo data -- populates a registry with sample users and trips.

Enabled with ``SEED_DEMO_DATA=true``; the application lifespan calls
``seed_registry`` on start-up.

Creates:
  - 4 sample riders
  - 3 sample drivers
  - 5 sample trips (mix of Pending, Assigned, Completed)
"""

import logging

from rideshare.domain.enums import UserKind
from rideshare.domain.registry import Registry

logger = logging.getLogger(__name__)


RIDERS = [
    {"name": "Alice Walker", "phone_number": "555-123-4567"},
    {"name": "Priya Patel", "phone_number": "555-234-5678"},
    {"name": "Rohan Mehta", "phone_number": "555-345-6789"},
    {"name": "Meera Nair", "phone_number": "555-456-7890"},
]

DRIVERS = [
    {"name": "Bob Singh", "phone_number": "555-987-6543", "vehicle_details": "Toyota Prius, white"},
    {"name": "Karan Joshi", "phone_number": "555-876-5432", "vehicle_details": "Honda City, grey"},
    {"name": "Diya Iyer", "phone_number": "555-765-4321", "vehicle_details": "Hyundai Creta, blue"},
]

# (rider index, start, destination)
TRIPS = [
    (0, "Home", "Office"),
    (1, "Airport", "Central Station"),
    (2, "Mall", "University"),
    (3, "Office", "Gym"),
    (0, "Office", "Home"),
]


def seed_registry(registry: Registry) -> None:
    if registry.riders or registry.drivers:
        logger.info("Registry already seeded. Skipping.")
        return

    riders = [registry.register(UserKind.RIDER, **r) for r in RIDERS]
    drivers = [registry.register(UserKind.DRIVER, **d) for d in DRIVERS]

    for idx, start, destination in TRIPS:
        registry.request_ride(riders[idx], start, destination)

    # Completed: first trip by the first driver
    registry.accept_pending_ride(drivers[0])
    registry.complete_assigned_ride(drivers[0])

    # Assigned: next two pending trips
    registry.accept_pending_ride(drivers[0])
    registry.accept_pending_ride(drivers[1])

    logger.info(
        "Seeded %d riders, %d drivers, %d trips",
        len(riders), len(drivers), len(TRIPS),
    )
