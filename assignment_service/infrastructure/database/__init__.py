from .base import Base
from .gateway import DatabaseGateway, build_engine, translate_error
from .models import AssignmentModel

__all__ = [
    "Base",
    "DatabaseGateway",
    "build_engine",
    "translate_error",
    "AssignmentModel",
]
