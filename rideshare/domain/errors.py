"""Domain errors.

Every error is local and recoverable: the registry raises it to the
immediate caller and leaves its own state untouched.
"""


class RideSharingError(Exception):
    """Base class for all ride-sharing domain errors."""


class InvalidPhoneNumber(RideSharingError, ValueError):
    """Raised when a user is constructed with a malformed phone number."""

    def __init__(self, phone_number: str):
        super().__init__(
            f"Invalid phone number format: {phone_number!r} "
            "(expected XXX-XXX-XXXX)"
        )
        self.phone_number = phone_number


class DriverUnavailable(RideSharingError):
    """Raised when an engaged driver tries to accept another ride."""


class NoPendingTrip(RideSharingError):
    """Raised when a driver asks for a ride and none is pending."""


class NoAssignedTripForDriver(RideSharingError):
    """Raised when a driver has no assigned trip to complete."""


class InvalidStateTransition(RideSharingError):
    """Raised when a trip status change violates the state machine."""


class DuplicateUser(RideSharingError):
    """Raised when a user ID or driver ID is registered twice."""


class UserNotFound(RideSharingError):
    """Raised when a user ID is unknown or the user is not registered here."""


class TripNotFound(RideSharingError):
    """Raised when a trip ID is unknown to the registry."""
