"""
Ride-Sharing Registry
=====================

The registry is the single in-memory authority for users and trips.  It
is the only component that creates trips, and it owns the trip arena:
rider and driver histories reference trips by ID.

Selection policy
----------------
* **Accept**: the first trip in insertion order that is still PENDING
  (first-come-first-served; no geographic or capacity matching).
* **Complete**: the first trip in insertion order that is ASSIGNED to the
  calling driver.

Concurrency safety
------------------
Every mutating operation runs under one re-entrant lock.  Selection and
acceptance share a critical section, so when two drivers race for the
sole pending trip exactly one wins and the other gets ``NoPendingTrip``.

Membership
----------
Every operation that takes a user or a trip checks that it is the very
object registered here (``UserNotFound`` / ``TripNotFound`` otherwise), so
a trip's driver is always one of the registered drivers and every history
entry resolves in the trip arena.

Complexity: selection is O(T) in the number of trips; everything else is
O(1) amortised.
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Optional

from .entities import Driver, Rider, Trip, TripCompleted, User, UserIdentity
from .enums import TripStatus, UserKind
from .errors import (
    DuplicateUser,
    InvalidStateTransition,
    NoAssignedTripForDriver,
    NoPendingTrip,
    TripNotFound,
    UserNotFound,
)
from .pricing import FarePolicy, FixedFare

logger = logging.getLogger(__name__)


class Registry:
    def __init__(
        self,
        fare_policy: Optional[FarePolicy] = None,
        currency_symbol: str = "$",
    ):
        self.fare_policy = fare_policy or FixedFare()
        self.currency_symbol = currency_symbol
        self._riders: dict[str, Rider] = {}
        self._drivers: dict[str, Driver] = {}
        self._driver_ids: set[str] = set()
        self._trips: dict[str, Trip] = {}
        self._rider_seq = itertools.count(1)
        self._driver_seq = itertools.count(1)
        self._lock = threading.RLock()

    # ── Users ─────────────────────────────────────────────────────────

    @property
    def riders(self) -> list[Rider]:
        return list(self._riders.values())

    @property
    def drivers(self) -> list[Driver]:
        return list(self._drivers.values())

    def register_user(self, user: User) -> User:
        with self._lock:
            user_id = user.identity.user_id
            if user_id in self._riders or user_id in self._drivers:
                raise DuplicateUser(f"User {user_id} is already registered")

            if user.kind is UserKind.RIDER:
                self._riders[user_id] = user
            else:
                if user.driver_id in self._driver_ids:
                    raise DuplicateUser(
                        f"Driver ID {user.driver_id} is already registered"
                    )
                self._drivers[user_id] = user
                self._driver_ids.add(user.driver_id)

        logger.info("%s (%s): %s", user.identity.name, user_id, user.register())
        return user

    def register(
        self,
        kind: UserKind,
        name: str,
        phone_number: str,
        driver_id: Optional[str] = None,
        vehicle_details: str = "",
    ) -> User:
        """Build a user with generated IDs and register it.

        Sequence numbers are per kind and never reused; numbers whose IDs
        are already taken (e.g. by ``register_user``) are skipped.
        """
        with self._lock:
            if kind is UserKind.RIDER:
                seq = self._next_seq(self._rider_seq, "R")
                user: User = Rider(UserIdentity(f"R{seq}", name, phone_number))
            else:
                seq = self._next_seq(self._driver_seq, "D", "DRV")
                user = Driver(
                    UserIdentity(f"D{seq}", name, phone_number),
                    driver_id=driver_id or f"DRV{seq}",
                    vehicle_details=vehicle_details,
                )
            return self.register_user(user)

    def _next_seq(
        self,
        counter: itertools.count,
        user_prefix: str,
        driver_prefix: Optional[str] = None,
    ) -> int:
        while True:
            seq = next(counter)
            user_id = f"{user_prefix}{seq}"
            if user_id in self._riders or user_id in self._drivers:
                continue
            if driver_prefix and f"{driver_prefix}{seq}" in self._driver_ids:
                continue
            return seq

    def login(self, user_id: str) -> User:
        user = self.get_user(user_id)
        logger.info(user.login())
        return user

    def get_user(self, user_id: str) -> User:
        user = self._riders.get(user_id) or self._drivers.get(user_id)
        if user is None:
            raise UserNotFound(f"User {user_id} not found")
        return user

    def get_rider(self, user_id: str) -> Rider:
        rider = self._riders.get(user_id)
        if rider is None:
            raise UserNotFound(f"Rider {user_id} not found")
        return rider

    def get_driver(self, user_id: str) -> Driver:
        driver = self._drivers.get(user_id)
        if driver is None:
            raise UserNotFound(f"Driver {user_id} not found")
        return driver

    def _check_registered(self, user: User) -> None:
        members = self._riders if user.kind is UserKind.RIDER else self._drivers
        if members.get(user.identity.user_id) is not user:
            raise UserNotFound(
                f"{user.kind.value} {user.identity.user_id} is not registered"
            )

    def _check_trip(self, trip: Trip) -> None:
        if self._trips.get(trip.trip_id) is not trip:
            raise TripNotFound(f"Trip {trip.trip_id} not found")

    # ── Trips ─────────────────────────────────────────────────────────

    def get_trip(self, trip_id: str) -> Trip:
        trip = self._trips.get(trip_id)
        if trip is None:
            raise TripNotFound(f"Trip {trip_id} not found")
        return trip

    def request_ride(
        self, rider: Rider, start_location: str, destination: str
    ) -> Trip:
        with self._lock:
            self._check_registered(rider)
            trip = Trip.create(
                rider, start_location, destination, self.fare_policy
            )
            self._trips[trip.trip_id] = trip
            rider.ride_history.append(trip.trip_id)
        logger.info(
            "Ride requested: trip %s for rider %s (%s -> %s)",
            trip.trip_id, rider.identity.user_id, start_location, destination,
        )
        return trip

    def assign_driver(self, driver: Driver, trip: Trip) -> bool:
        """Assign *driver* to *trip* if the driver is free; else do nothing."""
        with self._lock:
            self._check_registered(driver)
            self._check_trip(trip)
            if not driver.is_available:
                logger.debug(
                    "Driver %s is busy; trip %s left unassigned",
                    driver.identity.user_id, trip.trip_id,
                )
                return False
            driver.accept_ride(trip)
        logger.info(
            "Driver %s assigned to trip %s", driver.identity.user_id, trip.trip_id
        )
        return True

    def find_pending_trip(self) -> Optional[Trip]:
        with self._lock:
            for trip in self._trips.values():
                if trip.status is TripStatus.PENDING:
                    return trip
        return None

    def find_assigned_trip(self, driver: Driver) -> Optional[Trip]:
        with self._lock:
            for trip in self._trips.values():
                if trip.status is TripStatus.ASSIGNED and trip.driver is driver:
                    return trip
        return None

    def accept_pending_ride(self, driver: Driver) -> Trip:
        with self._lock:
            self._check_registered(driver)
            trip = self.find_pending_trip()
            if trip is None:
                raise NoPendingTrip("No pending rides to accept.")
            driver.accept_ride(trip)
        logger.info(
            "Driver %s accepted the ride request from %s (trip %s)",
            driver.identity.name, trip.rider.identity.name, trip.trip_id,
        )
        return trip

    def complete_assigned_ride(
        self, driver: Driver
    ) -> tuple[Trip, TripCompleted]:
        with self._lock:
            self._check_registered(driver)
            trip = self.find_assigned_trip(driver)
            if trip is None:
                raise NoAssignedTripForDriver("No assigned rides to complete.")
            event = driver.complete_ride(trip)
        logger.info(event.describe(self.currency_symbol))
        return trip, event

    def complete_trip(self, trip: Trip) -> TripCompleted:
        """Complete *trip* through its driver so availability stays in sync."""
        with self._lock:
            self._check_trip(trip)
            if trip.driver is None:
                raise InvalidStateTransition(
                    f"Trip {trip.trip_id} has no driver to complete it"
                )
            event = trip.driver.complete_ride(trip)
        logger.info(event.describe(self.currency_symbol))
        return event

    # ── Read side ─────────────────────────────────────────────────────

    def view_history(self, user: User) -> list[Trip]:
        with self._lock:
            self._check_registered(user)
            return [self._trips[trip_id] for trip_id in user.ride_history]

    def describe_history(self, user: User) -> list[str]:
        trips = self.view_history(user)
        if not trips:
            if user.kind is UserKind.RIDER:
                return ["No ride history found."]
            return ["No trip history found."]
        return [trip.describe(self.currency_symbol) for trip in trips]

    def list_all_trips(self) -> list[Trip]:
        with self._lock:
            return list(self._trips.values())

    def display_all_trips(self) -> list[str]:
        trips = self.list_all_trips()
        if not trips:
            return ["No trips found."]
        return [trip.describe(self.currency_symbol) for trip in trips]
