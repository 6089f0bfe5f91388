"""
Driver endpoints
================

POST /api/v1/drivers/{user_id}/accept   -- take the oldest pending trip
POST /api/v1/drivers/{user_id}/complete -- finish the driver's assigned trip
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from rideshare.api.dependencies import get_registry
from rideshare.api.middleware import limiter
from rideshare.api.schemas import (
    ErrorResponse,
    TripCompletionResponse,
    TripResponse,
)
from rideshare.config import settings
from rideshare.domain.errors import (
    DriverUnavailable,
    NoAssignedTripForDriver,
    NoPendingTrip,
    UserNotFound,
)
from rideshare.domain.registry import Registry

router = APIRouter(prefix="/drivers", tags=["drivers"])


@router.post(
    "/{user_id}/accept",
    response_model=TripResponse,
    summary="Accept the oldest pending ride",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown driver or no pending rides."},
        409: {"model": ErrorResponse, "description": "Driver is already on a trip."},
    },
)
@limiter.limit(settings.rate_limit)
async def accept_ride(
    request: Request,
    user_id: str,
    registry: Registry = Depends(get_registry),
):
    try:
        driver = registry.get_driver(user_id)
        trip = registry.accept_pending_ride(driver)
    except (UserNotFound, NoPendingTrip) as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except DriverUnavailable as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return TripResponse.from_trip(trip, registry.currency_symbol)


@router.post(
    "/{user_id}/complete",
    response_model=TripCompletionResponse,
    summary="Complete the driver's assigned ride",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown driver or no assigned ride."},
    },
)
@limiter.limit(settings.rate_limit)
async def complete_ride(
    request: Request,
    user_id: str,
    registry: Registry = Depends(get_registry),
):
    try:
        driver = registry.get_driver(user_id)
        trip, event = registry.complete_assigned_ride(driver)
    except (UserNotFound, NoAssignedTripForDriver) as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return TripCompletionResponse(
        trip=TripResponse.from_trip(trip, registry.currency_symbol),
        message=event.describe(registry.currency_symbol),
    )
