from .assignment import AssignmentModel

__all__ = [
    "AssignmentModel",
]
