"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from rideshare.domain.entities import Driver, Trip, User
from rideshare.domain.enums import TripStatus, UserKind


# ── Requests ──────────────────────────────────────────────────────────


class UserCreateRequest(BaseModel):
    kind: UserKind
    name: str = Field(..., min_length=1, max_length=120)
    phone_number: str = Field(
        ..., description="Phone number in the format XXX-XXX-XXXX."
    )
    driver_id: Optional[str] = Field(None, max_length=64)
    vehicle_details: str = Field("", max_length=255)


class RideCreateRequest(BaseModel):
    rider_id: str
    start_location: str = Field(..., min_length=1, max_length=255)
    destination: str = Field(..., min_length=1, max_length=255)


# ── Responses ─────────────────────────────────────────────────────────


class UserResponse(BaseModel):
    user_id: str
    kind: UserKind
    name: str
    phone_number: str
    driver_id: Optional[str] = None
    vehicle_details: Optional[str] = None
    is_available: Optional[bool] = None
    ride_history: list[str] = []

    @classmethod
    def from_user(cls, user: User) -> UserResponse:
        extra = {}
        if isinstance(user, Driver):
            extra = {
                "driver_id": user.driver_id,
                "vehicle_details": user.vehicle_details,
                "is_available": user.is_available,
            }
        return cls(
            user_id=user.identity.user_id,
            kind=user.kind,
            name=user.identity.name,
            phone_number=user.identity.phone_number,
            ride_history=list(user.ride_history),
            **extra,
        )


class LoginResponse(BaseModel):
    user: UserResponse
    message: str


class TripResponse(BaseModel):
    trip_id: str
    rider_id: str
    driver_id: Optional[str] = None
    start_location: str
    destination: str
    fare: float
    status: TripStatus
    summary: str
    created_at: datetime
    assigned_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @classmethod
    def from_trip(cls, trip: Trip, currency_symbol: str = "$") -> TripResponse:
        return cls(
            trip_id=trip.trip_id,
            rider_id=trip.rider.identity.user_id,
            driver_id=trip.driver.identity.user_id if trip.driver else None,
            start_location=trip.start_location,
            destination=trip.destination,
            fare=trip.fare,
            status=trip.status,
            summary=trip.describe(currency_symbol),
            created_at=trip.created_at,
            assigned_at=trip.assigned_at,
            completed_at=trip.completed_at,
        )


class TripCompletionResponse(BaseModel):
    trip: TripResponse
    message: str


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
