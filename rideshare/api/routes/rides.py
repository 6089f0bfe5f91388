"""
Ride endpoints
==============

POST /api/v1/rides           -- request a ride (trip starts PENDING)
GET  /api/v1/rides           -- every trip, in request order
GET  /api/v1/rides/{trip_id} -- one trip with its status and fare
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from rideshare.api.dependencies import get_registry
from rideshare.api.middleware import limiter
from rideshare.api.schemas import ErrorResponse, RideCreateRequest, TripResponse
from rideshare.config import settings
from rideshare.domain.errors import TripNotFound, UserNotFound
from rideshare.domain.registry import Registry

router = APIRouter(prefix="/rides", tags=["rides"])


@router.post(
    "",
    status_code=201,
    response_model=TripResponse,
    summary="Request a ride",
    responses={
        201: {"description": "Trip created; waiting for a driver."},
        404: {"model": ErrorResponse, "description": "Unknown rider."},
    },
)
@limiter.limit(settings.rate_limit)
async def request_ride(
    request: Request,
    body: RideCreateRequest,
    registry: Registry = Depends(get_registry),
):
    try:
        rider = registry.get_rider(body.rider_id)
    except UserNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    trip = registry.request_ride(rider, body.start_location, body.destination)
    return TripResponse.from_trip(trip, registry.currency_symbol)


@router.get(
    "",
    response_model=list[TripResponse],
    summary="List all trips",
)
@limiter.limit(settings.rate_limit)
async def list_trips(
    request: Request,
    registry: Registry = Depends(get_registry),
):
    return [
        TripResponse.from_trip(t, registry.currency_symbol)
        for t in registry.list_all_trips()
    ]


@router.get(
    "/{trip_id}",
    response_model=TripResponse,
    summary="Get trip status and fare",
    responses={404: {"model": ErrorResponse, "description": "Unknown trip."}},
)
@limiter.limit(settings.rate_limit)
async def get_trip(
    request: Request,
    trip_id: str,
    registry: Registry = Depends(get_registry),
):
    try:
        trip = registry.get_trip(trip_id)
    except TripNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return TripResponse.from_trip(trip, registry.currency_symbol)
