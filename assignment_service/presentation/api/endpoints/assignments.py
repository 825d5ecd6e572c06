"""Assignment CRUD endpoints."""

import logging

from fastapi import APIRouter, Depends, Query, status

from assignment_service.application.schemas import (
    AssignmentCreatedResponse,
    AssignmentDetailResponse,
    AssignmentListResponse,
    AssignmentPayload,
    AssignmentResponse,
    MessageResponse,
)
from assignment_service.application.services import AssignmentService
from assignment_service.domain.exceptions import (
    ConstraintViolationError,
    EntityNotFoundError,
    MissingFieldsError,
    StoreConnectionError,
    StoreError,
)
from assignment_service.infrastructure.dependencies import get_assignment_service
from assignment_service.presentation.api.errors import ApiError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assignments", tags=["Assignments"])

_READ_FAILED = "Server could not read assignment because database connection"


@router.get("", response_model=AssignmentListResponse)
async def list_assignments(
    category: str | None = Query(
        None, description="Case-insensitive category pattern ('%' and '_' are wildcards)"
    ),
    service: AssignmentService = Depends(get_assignment_service),
) -> AssignmentListResponse:
    """Retrieve all assignments, optionally filtered by category."""
    try:
        assignments = await service.list_assignments(category=category)
    except StoreError as e:
        logger.error("Error listing assignments: %s", e.detail)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, _READ_FAILED, e.detail)
    return AssignmentListResponse(
        data=[AssignmentResponse.model_validate(a, from_attributes=True) for a in assignments]
    )


@router.get("/{assignment_id}", response_model=AssignmentDetailResponse)
async def get_assignment(
    assignment_id: int,
    service: AssignmentService = Depends(get_assignment_service),
) -> AssignmentDetailResponse:
    """Retrieve a single assignment by ID."""
    try:
        assignment = await service.get_assignment(assignment_id)
    except EntityNotFoundError:
        raise ApiError(
            status.HTTP_404_NOT_FOUND, "Server could not find a requested assignment"
        )
    except StoreError as e:
        logger.error("Error reading assignment %s: %s", assignment_id, e.detail)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, _READ_FAILED, e.detail)
    return AssignmentDetailResponse(
        data=AssignmentResponse.model_validate(assignment, from_attributes=True)
    )


@router.post(
    "", response_model=AssignmentCreatedResponse, status_code=status.HTTP_201_CREATED
)
async def create_assignment(
    data: AssignmentPayload | None = None,
    service: AssignmentService = Depends(get_assignment_service),
) -> AssignmentCreatedResponse:
    """Create a new assignment."""
    try:
        assignment = await service.create_assignment(data or AssignmentPayload())
    except MissingFieldsError:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            "Missing required fields: title, content, and category are required.",
        )
    except StoreConnectionError as e:
        logger.error("Error creating assignment: %s", e.detail)
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Server could not create assignment because of a database connection error.",
            e.detail,
        )
    except ConstraintViolationError as e:
        logger.warning("Assignment rejected by the store: %s", e.detail)
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            "Cannot insert null values into required fields.",
            e.detail,
        )
    except StoreError as e:
        logger.error("Error creating assignment: %s", e.detail)
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred.", e.detail
        )
    return AssignmentCreatedResponse(
        message="Created Assignment Successfully",
        assignment_id=assignment.assignment_id,
    )


@router.put("/{assignment_id}", response_model=MessageResponse)
async def update_assignment(
    assignment_id: int,
    data: AssignmentPayload | None = None,
    service: AssignmentService = Depends(get_assignment_service),
) -> MessageResponse:
    """Replace an assignment's title, content and category."""
    try:
        await service.update_assignment(assignment_id, data or AssignmentPayload())
    except MissingFieldsError:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            "All fields (title, content, category) are required.",
        )
    except EntityNotFoundError:
        raise ApiError(
            status.HTTP_404_NOT_FOUND,
            "Server could not find a requested assignment to update",
        )
    except StoreError as e:
        logger.error("Error updating assignment %s: %s", assignment_id, e.detail)
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Server could not update assignment because database connection",
            e.detail,
        )
    return MessageResponse(message="Assignment updated successfully.")


@router.delete("/{assignment_id}", response_model=MessageResponse)
async def delete_assignment(
    assignment_id: int,
    service: AssignmentService = Depends(get_assignment_service),
) -> MessageResponse:
    """Delete an assignment by ID."""
    try:
        await service.delete_assignment(assignment_id)
    except EntityNotFoundError:
        raise ApiError(
            status.HTTP_404_NOT_FOUND,
            "Server could not find a requested assignment to delete",
        )
    except StoreError as e:
        logger.error("Error deleting assignment %s: %s", assignment_id, e.detail)
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Server could not delete assignment because database connection",
            e.detail,
        )
    return MessageResponse(message="Assignment deleted successfully.")
