"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from assignment_service.presentation.api.endpoints.assignments import router as assignments_router
from assignment_service.presentation.api.endpoints.health import router as health_router

router = APIRouter()
router.include_router(health_router)
router.include_router(assignments_router)
