"""
Task domain model.
Represents a unit of work owned by exactly one user.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum

from taskboard.domain.models.base import BaseEntity, ValidationError

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 2000


class TaskStatus(str, Enum):
    """
    Task status.

    Owners may set any status directly; the pending -> in_progress -> completed
    order is a convention, not an enforced transition.
    """
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(eq=False)
class Task(BaseEntity):
    """Task entity."""

    title: Optional[str] = None
    owner_id: Optional[str] = None
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.status, TaskStatus):
            self.status = TaskStatus(self.status)
        self.validate()

    def validate(self) -> None:
        if not self.title or not self.title.strip():
            raise ValidationError("Title is required", "title")
        if len(self.title) > TITLE_MAX_LENGTH:
            raise ValidationError(
                f"Title too long (max {TITLE_MAX_LENGTH} characters)", "title"
            )
        if self.description is not None and len(self.description) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"Description too long (max {DESCRIPTION_MAX_LENGTH} characters)",
                "description"
            )
        if not self.owner_id:
            raise ValidationError("Task owner is required", "owner_id")

    @classmethod
    def create(cls, title: str, owner_id: str, description: Optional[str] = None) -> "Task":
        """Create a new pending task for the given owner."""
        return cls(
            title=title.strip() if isinstance(title, str) else title,
            description=description,
            owner_id=owner_id,
            status=TaskStatus.PENDING,
        )
