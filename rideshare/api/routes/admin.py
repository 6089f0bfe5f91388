"""
Admin / observability endpoints
===============================

GET /api/v1/admin/drivers -- every registered driver with availability
GET /api/v1/admin/health  -- simple health check
"""

from fastapi import APIRouter, Depends, Request

from rideshare.api.dependencies import get_registry
from rideshare.api.middleware import limiter
from rideshare.api.schemas import HealthResponse, UserResponse
from rideshare.config import settings
from rideshare.domain.registry import Registry

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get(
    "/drivers",
    response_model=list[UserResponse],
    summary="List all drivers and whether they are free",
)
@limiter.limit(settings.rate_limit)
async def list_drivers(
    request: Request,
    registry: Registry = Depends(get_registry),
):
    return [UserResponse.from_user(d) for d in registry.drivers]


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()
