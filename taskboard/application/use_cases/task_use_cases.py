"""
Task use cases for the application layer.
Every operation is scoped to the owner taken from the caller's token.
"""

import logging
from typing import List, Optional

from taskboard.application.dto.task_dto import (
    CreateTaskRequestDTO,
    TaskResponseDTO,
    TaskStatsResponseDTO,
    UpdateTaskStatusRequestDTO,
)
from taskboard.application.use_cases.base_use_case import BaseUseCase
from taskboard.domain.models.base import EntityNotFoundError
from taskboard.domain.models.task import Task, TaskStatus
from taskboard.domain.repositories.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskUseCase(BaseUseCase):
    """Base for task use cases sharing a task repository."""

    def __init__(self, task_repository: TaskRepository):
        self.task_repository = task_repository


class CreateTaskUseCase(TaskUseCase):
    """Use case for creating a new task owned by the caller."""

    async def execute(self, owner_id: str, request: CreateTaskRequestDTO) -> TaskResponseDTO:
        task = Task.create(
            title=request.title,
            description=request.description,
            owner_id=owner_id,
        )
        saved = await self.task_repository.save(task)
        logger.info(f"Task {saved.id} created by {owner_id}")
        return TaskResponseDTO.from_domain(saved)


class ListMyTasksUseCase(TaskUseCase):
    """Use case for listing the caller's tasks, newest first."""

    async def execute(
        self,
        owner_id: str,
        status: Optional[TaskStatus] = None,
        search: Optional[str] = None
    ) -> List[TaskResponseDTO]:
        if search is not None and not search.strip():
            search = None
        tasks = await self.task_repository.find_by_owner(owner_id, status=status, search=search)
        return [TaskResponseDTO.from_domain(task) for task in tasks]


class GetTaskUseCase(TaskUseCase):
    """Use case for reading one of the caller's tasks."""

    async def execute(self, owner_id: str, task_id: str) -> TaskResponseDTO:
        task = await self.task_repository.find_owned(task_id, owner_id)
        if task is None:
            raise EntityNotFoundError("Task", task_id)
        return TaskResponseDTO.from_domain(task)


class UpdateTaskStatusUseCase(TaskUseCase):
    """
    Use case for setting a task's status.
    A task owned by someone else is reported exactly like a missing one.
    """

    async def execute(
        self,
        owner_id: str,
        task_id: str,
        request: UpdateTaskStatusRequestDTO
    ) -> TaskResponseDTO:
        status = TaskStatus(request.status)
        task = await self.task_repository.update_status(task_id, owner_id, status)
        if task is None:
            raise EntityNotFoundError("Task", task_id)
        logger.info(f"Task {task_id} status set to {status.value}")
        return TaskResponseDTO.from_domain(task)


class DeleteTaskUseCase(TaskUseCase):
    """Use case for deleting one of the caller's tasks."""

    async def execute(self, owner_id: str, task_id: str) -> None:
        deleted = await self.task_repository.delete_owned(task_id, owner_id)
        if not deleted:
            raise EntityNotFoundError("Task", task_id)
        logger.info(f"Task {task_id} deleted by {owner_id}")


class GetTaskStatsUseCase(TaskUseCase):
    """Use case for per-status task counts."""

    async def execute(self, owner_id: str) -> TaskStatsResponseDTO:
        counts = await self.task_repository.count_by_status(owner_id)
        return TaskStatsResponseDTO(
            total=sum(counts.values()),
            pending=counts.get(TaskStatus.PENDING, 0),
            in_progress=counts.get(TaskStatus.IN_PROGRESS, 0),
            completed=counts.get(TaskStatus.COMPLETED, 0),
        )
