"""
Domain entities with business logic.

Patterns used
-------------
- **State Pattern** on ``Trip``: enforces valid lifecycle transitions
  (PENDING -> ASSIGNED -> COMPLETED).
- **Tagged variant** for users: ``Rider`` and ``Driver`` share a
  ``UserIdentity`` record and are told apart by ``kind``, not by a common
  base class.
- Histories hold trip IDs; the ``Trip`` objects themselves live in the
  registry's trip arena.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import ClassVar, Optional, Union

from .enums import TRIP_TRANSITIONS, TripStatus, UserKind
from .errors import (
    DriverUnavailable,
    InvalidPhoneNumber,
    InvalidStateTransition,
    NoAssignedTripForDriver,
)
from .pricing import FarePolicy, FixedFare, format_fare

PHONE_NUMBER_PATTERN = re.compile(r"\d{3}-\d{3}-\d{4}")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class UserIdentity:
    user_id: str
    name: str
    phone_number: str

    def __post_init__(self) -> None:
        if not PHONE_NUMBER_PATTERN.fullmatch(self.phone_number):
            raise InvalidPhoneNumber(self.phone_number)


@dataclass(frozen=True)
class TripCompleted:
    """Event produced when a trip reaches COMPLETED."""

    trip_id: str
    start_location: str
    destination: str
    fare: float

    def describe(self, currency_symbol: str = "$") -> str:
        return (
            f"Trip from {self.start_location} to {self.destination} has been "
            f"completed. Fare: {format_fare(self.fare, currency_symbol)}"
        )


# ── Users ─────────────────────────────────────────────────────────────


@dataclass(eq=False)
class Rider:
    kind: ClassVar[UserKind] = UserKind.RIDER

    identity: UserIdentity
    ride_history: list[str] = field(default_factory=list)

    def register(self) -> str:
        return "Registered successfully as a Rider"

    def login(self) -> str:
        return f"Rider {self.identity.name} logged in successfully."


@dataclass(eq=False)
class Driver:
    kind: ClassVar[UserKind] = UserKind.DRIVER

    identity: UserIdentity
    driver_id: str
    vehicle_details: str
    is_available: bool = True
    ride_history: list[str] = field(default_factory=list)

    def register(self) -> str:
        return "Registered successfully as a Driver"

    def login(self) -> str:
        return f"Driver {self.identity.name} logged in successfully."

    def accept_ride(self, trip: Trip) -> None:
        """Take *trip*; the driver stays engaged until it is completed."""
        if not self.is_available:
            raise DriverUnavailable(
                f"Driver {self.identity.name} is not available."
            )
        trip.assign_driver(self)
        self.is_available = False

    def complete_ride(self, trip: Trip) -> TripCompleted:
        if trip.driver is not self:
            raise NoAssignedTripForDriver(
                f"Trip {trip.trip_id} is not assigned to driver "
                f"{self.identity.name}."
            )
        event = trip.complete()
        self.is_available = True
        self.ride_history.append(trip.trip_id)
        return event


User = Union[Rider, Driver]


# ── Trip ──────────────────────────────────────────────────────────────


@dataclass(eq=False)
class Trip:
    rider: Rider
    start_location: str
    destination: str
    fare: float
    trip_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    driver: Optional[Driver] = None
    status: TripStatus = TripStatus.PENDING
    created_at: datetime = field(default_factory=_utcnow)
    assigned_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        rider: Rider,
        start_location: str,
        destination: str,
        fare_policy: Optional[FarePolicy] = None,
    ) -> Trip:
        policy = fare_policy or FixedFare()
        return cls(
            rider=rider,
            start_location=start_location,
            destination=destination,
            fare=policy.calculate(start_location, destination),
        )

    def transition_to(self, new_status: TripStatus) -> None:
        """Move to *new_status* if the transition is legal, else raise."""
        allowed = TRIP_TRANSITIONS.get(self.status, set())
        if new_status not in allowed:
            raise InvalidStateTransition(
                f"Cannot transition trip {self.trip_id} from "
                f"{self.status.value} to {new_status.value}"
            )
        self.status = new_status

    def assign_driver(self, driver: Driver) -> None:
        self.transition_to(TripStatus.ASSIGNED)
        self.driver = driver
        self.assigned_at = _utcnow()

    def complete(self) -> TripCompleted:
        self.transition_to(TripStatus.COMPLETED)
        self.completed_at = _utcnow()
        return TripCompleted(
            trip_id=self.trip_id,
            start_location=self.start_location,
            destination=self.destination,
            fare=self.fare,
        )

    def describe(self, currency_symbol: str = "$") -> str:
        driver_name = self.driver.identity.name if self.driver else "Pending"
        return (
            f"TripID: {self.trip_id}, Rider: {self.rider.identity.name}, "
            f"Driver: {driver_name}, From: {self.start_location}, "
            f"To: {self.destination}, "
            f"Fare: {format_fare(self.fare, currency_symbol)}, "
            f"Status: {self.status.value}"
        )
