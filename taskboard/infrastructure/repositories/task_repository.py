"""
Task repository implementation using SQLAlchemy.

Status updates and deletes are single conditional statements keyed on both the
task ID and the owner ID; there is no read-then-write window in which the
ownership check could go stale.
"""

from typing import Dict, List, Optional

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.domain.models.base import new_id, utc_now
from taskboard.domain.models.task import Task, TaskStatus
from taskboard.domain.repositories.task_repository import TaskRepository
from taskboard.infrastructure.db.models import TaskModel
from taskboard.infrastructure.mappers.task_mapper import TaskMapper


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SQLAlchemyTaskRepository(TaskRepository):
    """SQLAlchemy implementation of task repository."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.mapper = TaskMapper()

    async def save(self, task: Task) -> Task:
        """Save a new task entity. Existing tasks change via update_status."""
        if not task.is_new:
            raise ValueError("Task is already persisted")

        task.id = new_id()
        model = self.mapper.domain_to_model(task)
        self.session.add(model)
        await self.session.flush()
        return task

    async def find_owned(self, task_id: str, owner_id: str) -> Optional[Task]:
        """Get task by ID, scoped to its owner."""
        result = await self.session.execute(
            select(TaskModel).where(
                TaskModel.id == task_id,
                TaskModel.owner_id == owner_id
            )
        )
        model = result.scalar_one_or_none()
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def find_by_owner(
        self,
        owner_id: str,
        status: Optional[TaskStatus] = None,
        search: Optional[str] = None
    ) -> List[Task]:
        """Get tasks by owner, newest first."""
        query = select(TaskModel).where(TaskModel.owner_id == owner_id)

        if status is not None:
            query = query.where(TaskModel.status == TaskStatus(status))

        if search:
            pattern = _like_pattern(search.strip())
            query = query.where(
                or_(
                    TaskModel.title.ilike(pattern, escape="\\"),
                    TaskModel.description.ilike(pattern, escape="\\")
                )
            )

        query = query.order_by(TaskModel.created_at.desc(), TaskModel.id.desc())
        result = await self.session.execute(query)
        return [self.mapper.model_to_domain(model) for model in result.scalars().all()]

    async def update_status(self, task_id: str, owner_id: str, status: TaskStatus) -> Optional[Task]:
        """Conditionally update the status of an owned task."""
        result = await self.session.execute(
            update(TaskModel)
            .where(TaskModel.id == task_id, TaskModel.owner_id == owner_id)
            .values(status=TaskStatus(status), updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            return None

        # Drop any stale identity-map copy before reading the row back
        self.session.expire_all()
        return await self.find_owned(task_id, owner_id)

    async def delete_owned(self, task_id: str, owner_id: str) -> bool:
        """Conditionally delete an owned task."""
        result = await self.session.execute(
            delete(TaskModel)
            .where(TaskModel.id == task_id, TaskModel.owner_id == owner_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    async def count_by_status(self, owner_id: str) -> Dict[TaskStatus, int]:
        """Get task counts per status for an owner."""
        result = await self.session.execute(
            select(TaskModel.status, func.count(TaskModel.id))
            .where(TaskModel.owner_id == owner_id)
            .group_by(TaskModel.status)
        )
        counts = {status: 0 for status in TaskStatus}
        for status, count in result.all():
            counts[TaskStatus(status)] = count
        return counts
