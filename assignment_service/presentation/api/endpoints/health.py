"""Liveness and readiness endpoints."""

from fastapi import APIRouter, Depends, status

from assignment_service.config import get_settings
from assignment_service.domain.exceptions import StoreError
from assignment_service.infrastructure.database.gateway import DatabaseGateway
from assignment_service.infrastructure.dependencies import get_gateway
from assignment_service.presentation.api.errors import ApiError

router = APIRouter(tags=["Health"])


@router.get("/test")
async def server_check() -> str:
    """Fixed confirmation that the API process is up."""
    return "Server API is working 🚀"


@router.get("/health")
async def health_check() -> dict:
    """Returns the current application health status. Never touches the store."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
    }


@router.get("/health/db")
async def database_health_check(
    gateway: DatabaseGateway = Depends(get_gateway),
) -> dict:
    """Readiness probe — round-trips a trivial query through the pool."""
    try:
        await gateway.ping()
    except StoreError as e:
        raise ApiError(
            status.HTTP_503_SERVICE_UNAVAILABLE, "Database is not reachable", e.detail
        )
    return {"status": "ok"}
