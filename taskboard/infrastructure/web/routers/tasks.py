"""
Task management router.
Handles ownership-scoped CRUD operations for tasks.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from taskboard.application.dto.base_dto import ErrorResponseDTO
from taskboard.application.dto.task_dto import (
    CreateTaskRequestDTO,
    TaskResponseDTO,
    TaskStatsResponseDTO,
    UpdateTaskStatusRequestDTO,
)
from taskboard.application.use_cases.task_use_cases import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskStatsUseCase,
    GetTaskUseCase,
    ListMyTasksUseCase,
    UpdateTaskStatusUseCase,
)
from taskboard.domain.models.task import TaskStatus
from taskboard.infrastructure.auth import get_current_user_id, get_task_repository
from taskboard.infrastructure.repositories.task_repository import SQLAlchemyTaskRepository


router = APIRouter()

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponseDTO, "description": "Task not found"}}

UserId = Annotated[str, Depends(get_current_user_id)]
Repository = Annotated[SQLAlchemyTaskRepository, Depends(get_task_repository)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TaskResponseDTO)
async def create_task(request: CreateTaskRequestDTO, user_id: UserId, repository: Repository):
    """
    Create a new task owned by the caller. New tasks start as `pending`.

    - **title**: Task title (required)
    - **description**: Optional description
    """
    return await CreateTaskUseCase(repository).execute(user_id, request)


@router.get("", response_model=List[TaskResponseDTO])
async def list_tasks(
    user_id: UserId,
    repository: Repository,
    status_filter: Optional[TaskStatus] = Query(None, alias="status", description="Filter by status"),
    search: Optional[str] = Query(None, max_length=255, description="Search title and description")
):
    """
    List the caller's tasks, newest first.
    """
    return await ListMyTasksUseCase(repository).execute(user_id, status=status_filter, search=search)


@router.get("/stats", response_model=TaskStatsResponseDTO)
async def task_stats(user_id: UserId, repository: Repository):
    """
    Count the caller's tasks per status.
    """
    return await GetTaskStatsUseCase(repository).execute(user_id)


@router.get("/{task_id}", response_model=TaskResponseDTO, responses=NOT_FOUND_RESPONSE)
async def get_task(task_id: str, user_id: UserId, repository: Repository):
    """
    Get one of the caller's tasks.
    """
    return await GetTaskUseCase(repository).execute(user_id, task_id)


@router.patch("/{task_id}/status", response_model=TaskResponseDTO, responses=NOT_FOUND_RESPONSE)
async def update_task_status(
    task_id: str,
    request: UpdateTaskStatusRequestDTO,
    user_id: UserId,
    repository: Repository
):
    """
    Set the status of one of the caller's tasks.

    - **status**: `pending`, `in_progress` or `completed`
    """
    return await UpdateTaskStatusUseCase(repository).execute(user_id, task_id, request)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND_RESPONSE)
async def delete_task(task_id: str, user_id: UserId, repository: Repository):
    """
    Delete one of the caller's tasks.
    """
    await DeleteTaskUseCase(repository).execute(user_id, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
