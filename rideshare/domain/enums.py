"""Domain enumerations and state-transition rules."""

import enum


class TripStatus(str, enum.Enum):
    PENDING = "Pending"
    ASSIGNED = "Assigned"
    COMPLETED = "Completed"


# State machine: maps current status -> set of valid next statuses
TRIP_TRANSITIONS: dict[TripStatus, set[TripStatus]] = {
    TripStatus.PENDING: {TripStatus.ASSIGNED},
    TripStatus.ASSIGNED: {TripStatus.COMPLETED},
    TripStatus.COMPLETED: set(),
}


class UserKind(str, enum.Enum):
    RIDER = "Rider"
    DRIVER = "Driver"
