"""Application service (use case) for Assignment operations."""

import logging
from datetime import datetime, timezone

from assignment_service.application.interfaces import AssignmentRepository
from assignment_service.application.schemas import AssignmentPayload
from assignment_service.domain.entities import Assignment
from assignment_service.domain.exceptions import EntityNotFoundError, MissingFieldsError

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("title", "content", "category")


def _missing_fields(data: AssignmentPayload) -> list[str]:
    return [name for name in _REQUIRED_FIELDS if not getattr(data, name)]


class AssignmentService:
    """Orchestrates assignment business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: AssignmentRepository):
        self._repository = repository

    async def get_assignment(self, assignment_id: int) -> Assignment:
        assignment = await self._repository.get_by_id(assignment_id)
        if assignment is None:
            raise EntityNotFoundError("Assignment", assignment_id)
        return assignment

    async def list_assignments(self, category: str | None = None) -> list[Assignment]:
        # An empty filter means "no filter"
        return await self._repository.get_all(category=category or None)

    async def create_assignment(self, data: AssignmentPayload) -> Assignment:
        missing = _missing_fields(data)
        if missing:
            raise MissingFieldsError("Assignment", missing)

        assignment = Assignment.draft(
            title=data.title,
            content=data.content,
            category=data.category,
        )
        created = await self._repository.create(assignment)
        logger.info(
            "Created assignment %s (category=%r)", created.assignment_id, created.category
        )
        return created

    async def update_assignment(self, assignment_id: int, data: AssignmentPayload) -> None:
        """Replace title, content and category; created/published timestamps are kept."""
        missing = _missing_fields(data)
        if missing:
            raise MissingFieldsError("Assignment", missing)

        matched = await self._repository.update(
            assignment_id,
            title=data.title,
            content=data.content,
            category=data.category,
            updated_at=datetime.now(timezone.utc),
        )
        if not matched:
            raise EntityNotFoundError("Assignment", assignment_id)
        logger.info("Updated assignment %s", assignment_id)

    async def delete_assignment(self, assignment_id: int) -> None:
        deleted = await self._repository.delete(assignment_id)
        if not deleted:
            raise EntityNotFoundError("Assignment", assignment_id)
        logger.info("Deleted assignment %s", assignment_id)
