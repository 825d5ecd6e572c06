from .assignment import (
    AssignmentPayload,
    AssignmentResponse,
    AssignmentListResponse,
    AssignmentDetailResponse,
    AssignmentCreatedResponse,
    MessageResponse,
    ErrorResponse,
)

__all__ = [
    "AssignmentPayload",
    "AssignmentResponse",
    "AssignmentListResponse",
    "AssignmentDetailResponse",
    "AssignmentCreatedResponse",
    "MessageResponse",
    "ErrorResponse",
]
