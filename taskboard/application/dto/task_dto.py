"""
Task DTOs for the application layer.
Data Transfer Objects for task-related operations.
"""

from typing import Optional
from pydantic import Field, field_validator

from taskboard.domain.models.task import (
    DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, Task, TaskStatus
)
from .base_dto import RequestDTO, ResponseDTO, TimestampedResponseDTO


class CreateTaskRequestDTO(RequestDTO):
    """DTO for task creation requests."""

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH, description="Task title")
    description: Optional[str] = Field(
        default=None, max_length=DESCRIPTION_MAX_LENGTH, description="Task description"
    )

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('Title is required')
        return v


class UpdateTaskStatusRequestDTO(RequestDTO):
    """DTO for task status updates. Any status may be set from any status."""

    status: TaskStatus = Field(description="New task status")


class TaskResponseDTO(TimestampedResponseDTO):
    """DTO for task responses."""

    title: str
    description: Optional[str] = None
    status: TaskStatus
    owner_id: str

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponseDTO":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            owner_id=task.owner_id,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskStatsResponseDTO(ResponseDTO):
    """Per-status task counts for the caller."""

    total: int = 0
    pending: int = 0
    in_progress: int = 0
    completed: int = 0
