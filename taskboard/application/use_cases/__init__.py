"""
Use cases for the application layer.
"""

from .base_use_case import BaseUseCase
from .auth_use_cases import LoginUseCase, RegisterUserUseCase
from .task_use_cases import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskStatsUseCase,
    GetTaskUseCase,
    ListMyTasksUseCase,
    UpdateTaskStatusUseCase,
)
from .user_use_cases import ChangeUserRoleUseCase, ListUsersUseCase

__all__ = [
    "BaseUseCase",
    "LoginUseCase",
    "RegisterUserUseCase",
    "CreateTaskUseCase",
    "DeleteTaskUseCase",
    "GetTaskStatsUseCase",
    "GetTaskUseCase",
    "ListMyTasksUseCase",
    "UpdateTaskStatusUseCase",
    "ChangeUserRoleUseCase",
    "ListUsersUseCase",
]
