"""Pydantic DTOs (Data Transfer Objects) for the Assignment feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class AssignmentPayload(BaseModel):
    """Request body for create and full-replacement update.

    Fields are optional at the schema level so that missing or empty values
    reach the service and are reported with the assignment-specific message.
    """

    title: str | None = Field(None, examples=["Linear equations"])
    content: str | None = Field(None, examples=["Solve exercises 1 to 10."])
    category: str | None = Field(None, examples=["Math"])


class AssignmentResponse(BaseModel):
    """A single assignment as returned to the client."""

    assignment_id: int
    title: str
    content: str
    category: str
    created_at: datetime
    updated_at: datetime
    published_at: datetime

    model_config = {"from_attributes": True}


class AssignmentListResponse(BaseModel):
    data: list[AssignmentResponse]


class AssignmentDetailResponse(BaseModel):
    data: AssignmentResponse


class MessageResponse(BaseModel):
    message: str


class AssignmentCreatedResponse(MessageResponse):
    assignment_id: int


class ErrorResponse(BaseModel):
    """Error envelope; ``error`` carries the raw store message when there is one."""

    message: str
    error: str | None = None
