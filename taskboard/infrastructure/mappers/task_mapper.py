"""
Task mapper for converting between domain entities and database models.
"""

from taskboard.domain.models.task import Task, TaskStatus
from taskboard.infrastructure.db.models import TaskModel
from taskboard.infrastructure.mappers.user_mapper import as_utc


class TaskMapper:
    """Maps between Task domain entity and TaskModel database model."""

    def domain_to_model(self, task: Task) -> TaskModel:
        """Convert Task domain entity to TaskModel."""
        return TaskModel(
            id=task.id,
            owner_id=task.owner_id,
            title=task.title,
            description=task.description,
            status=task.status,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    def model_to_domain(self, model: TaskModel) -> Task:
        """Convert TaskModel to Task domain entity."""
        return Task(
            id=model.id,
            owner_id=model.owner_id,
            title=model.title,
            description=model.description,
            status=TaskStatus(model.status) if model.status else TaskStatus.PENDING,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )
