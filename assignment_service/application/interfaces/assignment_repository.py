"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from datetime import datetime

from assignment_service.domain.entities import Assignment


class AssignmentRepository(ABC):
    """Port for assignment persistence — implemented in the infrastructure layer.

    Every method maps to exactly one statement against the store.
    """

    @abstractmethod
    async def get_by_id(self, assignment_id: int) -> Assignment | None:
        """Retrieve a single assignment by its ID."""
        ...

    @abstractmethod
    async def get_all(self, category: str | None = None) -> list[Assignment]:
        """Retrieve all assignments, optionally filtered by a case-insensitive category pattern."""
        ...

    @abstractmethod
    async def create(self, assignment: Assignment) -> Assignment:
        """Persist a new assignment and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(
        self,
        assignment_id: int,
        *,
        title: str,
        content: str,
        category: str,
        updated_at: datetime,
    ) -> bool:
        """Replace the editable fields. Returns True if a row matched, False otherwise."""
        ...

    @abstractmethod
    async def delete(self, assignment_id: int) -> bool:
        """Delete an assignment. Returns True if deleted, False if not found."""
        ...
