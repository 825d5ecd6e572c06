"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Assignment:
    """Core domain entity representing a single assignment."""

    title: str
    content: str
    category: str
    assignment_id: int | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
    published_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def draft(cls, title: str, content: str, category: str) -> "Assignment":
        """Build an unsaved assignment with all three timestamps set to one instant."""
        now = _utcnow()
        return cls(
            title=title,
            content=content,
            category=category,
            created_at=now,
            updated_at=now,
            published_at=now,
        )
