"""
Task repository interface.
Defines the contract for task data persistence operations.

Every lookup and mutation takes the owner ID so that a task owned by someone
else is indistinguishable from one that does not exist.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from taskboard.domain.models.task import Task, TaskStatus


class TaskRepository(ABC):
    """Repository interface for Task entity."""

    @abstractmethod
    async def save(self, task: Task) -> Task:
        """
        Save a new task entity.
        Returns the saved task with its assigned ID.
        """
        pass

    @abstractmethod
    async def find_owned(self, task_id: str, owner_id: str) -> Optional[Task]:
        """Find a task by ID if it belongs to owner_id."""
        pass

    @abstractmethod
    async def find_by_owner(
        self,
        owner_id: str,
        status: Optional[TaskStatus] = None,
        search: Optional[str] = None
    ) -> List[Task]:
        """
        Find all tasks owned by a user, newest first.
        Optionally filter by status and by a case-insensitive search over
        title and description.
        """
        pass

    @abstractmethod
    async def update_status(self, task_id: str, owner_id: str, status: TaskStatus) -> Optional[Task]:
        """
        Set the status of an owned task in a single conditional update.
        Returns the updated task, or None when no owned task matched.
        """
        pass

    @abstractmethod
    async def delete_owned(self, task_id: str, owner_id: str) -> bool:
        """
        Delete an owned task in a single conditional delete.
        Returns False when no owned task matched.
        """
        pass

    @abstractmethod
    async def count_by_status(self, owner_id: str) -> Dict[TaskStatus, int]:
        """Count the owner's tasks grouped by status."""
        pass
