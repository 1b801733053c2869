"""
Data Transfer Objects for the application layer.
"""

from .base_dto import BaseDTO, RequestDTO, ResponseDTO, ErrorResponseDTO
from .auth_dto import (
    RegisterRequestDTO,
    LoginRequestDTO,
    RegisterResponseDTO,
    TokenResponseDTO,
    ProfileResponseDTO,
)
from .task_dto import (
    CreateTaskRequestDTO,
    UpdateTaskStatusRequestDTO,
    TaskResponseDTO,
    TaskStatsResponseDTO,
)
from .user_dto import UserResponseDTO, UserListResponseDTO

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "ErrorResponseDTO",
    "RegisterRequestDTO",
    "LoginRequestDTO",
    "RegisterResponseDTO",
    "TokenResponseDTO",
    "ProfileResponseDTO",
    "CreateTaskRequestDTO",
    "UpdateTaskStatusRequestDTO",
    "TaskResponseDTO",
    "TaskStatsResponseDTO",
    "UserResponseDTO",
    "UserListResponseDTO",
]
