"""
User endpoints
==============

POST /api/v1/users                     -- register a rider or driver
POST /api/v1/users/{user_id}/login     -- log a registered user in
GET  /api/v1/users/{user_id}/history   -- the user's trips, oldest first
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from rideshare.api.dependencies import get_registry
from rideshare.api.middleware import limiter
from rideshare.api.schemas import (
    ErrorResponse,
    LoginResponse,
    TripResponse,
    UserCreateRequest,
    UserResponse,
)
from rideshare.config import settings
from rideshare.domain.errors import DuplicateUser, InvalidPhoneNumber, UserNotFound
from rideshare.domain.registry import Registry

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    status_code=201,
    response_model=UserResponse,
    summary="Register a rider or driver",
    responses={
        409: {"model": ErrorResponse, "description": "User ID or driver ID already registered."},
        422: {"model": ErrorResponse, "description": "Phone number is not in XXX-XXX-XXXX format."},
    },
)
@limiter.limit(settings.rate_limit)
async def register_user(
    request: Request,
    body: UserCreateRequest,
    registry: Registry = Depends(get_registry),
):
    try:
        user = registry.register(
            body.kind,
            body.name,
            body.phone_number,
            driver_id=body.driver_id,
            vehicle_details=body.vehicle_details,
        )
    except InvalidPhoneNumber as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except DuplicateUser as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return UserResponse.from_user(user)


@router.post(
    "/{user_id}/login",
    response_model=LoginResponse,
    summary="Log a registered user in",
    responses={404: {"model": ErrorResponse, "description": "Unknown user."}},
)
@limiter.limit(settings.rate_limit)
async def login(
    request: Request,
    user_id: str,
    registry: Registry = Depends(get_registry),
):
    try:
        user = registry.login(user_id)
    except UserNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return LoginResponse(user=UserResponse.from_user(user), message=user.login())


@router.get(
    "/{user_id}/history",
    response_model=list[TripResponse],
    summary="View a user's ride history",
    responses={404: {"model": ErrorResponse, "description": "Unknown user."}},
)
@limiter.limit(settings.rate_limit)
async def view_history(
    request: Request,
    user_id: str,
    registry: Registry = Depends(get_registry),
):
    try:
        user = registry.get_user(user_id)
    except UserNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return [
        TripResponse.from_trip(t, registry.currency_symbol)
        for t in registry.view_history(user)
    ]
