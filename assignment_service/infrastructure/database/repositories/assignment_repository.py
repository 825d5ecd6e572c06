"""Concrete repository implementation backed by SQLAlchemy Core statements."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from sqlalchemy import delete, insert, select, update

from assignment_service.application.interfaces import AssignmentRepository
from assignment_service.domain.entities import Assignment
from assignment_service.infrastructure.database.gateway import DatabaseGateway
from assignment_service.infrastructure.database.models import AssignmentModel

_assignments = AssignmentModel.__table__


class SQLAlchemyAssignmentRepository(AssignmentRepository):
    """Implements the AssignmentRepository port on top of the DatabaseGateway.

    Each method builds one bound-parameter statement and hands it to the
    gateway; the gateway's typed store errors propagate unchanged.
    """

    def __init__(self, gateway: DatabaseGateway):
        self._gateway = gateway

    def _to_entity(self, row: Mapping[str, Any]) -> Assignment:
        """Map a result row → domain entity."""
        return Assignment(
            assignment_id=row["assignment_id"],
            title=row["title"],
            content=row["content"],
            category=row["category"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            published_at=row["published_at"],
        )

    async def get_by_id(self, assignment_id: int) -> Assignment | None:
        stmt = select(_assignments).where(_assignments.c.assignment_id == assignment_id)
        row = await self._gateway.fetch_one(stmt)
        return self._to_entity(row) if row else None

    async def get_all(self, category: str | None = None) -> list[Assignment]:
        stmt = select(_assignments).order_by(_assignments.c.assignment_id)
        if category:
            # The value is a pattern: '%' and '_' keep their LIKE meaning
            stmt = stmt.where(_assignments.c.category.ilike(category))
        rows = await self._gateway.fetch_all(stmt)
        return [self._to_entity(row) for row in rows]

    async def create(self, assignment: Assignment) -> Assignment:
        stmt = (
            insert(_assignments)
            .values(
                title=assignment.title,
                content=assignment.content,
                category=assignment.category,
                created_at=assignment.created_at,
                updated_at=assignment.updated_at,
                published_at=assignment.published_at,
            )
            .returning(_assignments.c.assignment_id)
        )
        row = await self._gateway.fetch_one(stmt)
        assignment.assignment_id = row["assignment_id"]
        return assignment

    async def update(
        self,
        assignment_id: int,
        *,
        title: str,
        content: str,
        category: str,
        updated_at: datetime,
    ) -> bool:
        stmt = (
            update(_assignments)
            .where(_assignments.c.assignment_id == assignment_id)
            .values(
                title=title,
                content=content,
                category=category,
                updated_at=updated_at,
            )
        )
        return await self._gateway.execute(stmt) > 0

    async def delete(self, assignment_id: int) -> bool:
        stmt = delete(_assignments).where(_assignments.c.assignment_id == assignment_id)
        return await self._gateway.execute(stmt) > 0
