from .assignment_repository import SQLAlchemyAssignmentRepository

__all__ = [
    "SQLAlchemyAssignmentRepository",
]
