"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from assignment_service.application.services import AssignmentService
from assignment_service.infrastructure.database.gateway import DatabaseGateway
from assignment_service.infrastructure.database.repositories import (
    SQLAlchemyAssignmentRepository,
)


def get_gateway(request: Request) -> DatabaseGateway:
    """The gateway opened by the application lifespan."""
    return request.app.state.gateway


async def get_assignment_service(
    gateway: DatabaseGateway = Depends(get_gateway),
) -> AsyncGenerator[AssignmentService, None]:
    """Provides an AssignmentService instance with its repository wired up."""
    repository = SQLAlchemyAssignmentRepository(gateway)
    yield AssignmentService(repository)
