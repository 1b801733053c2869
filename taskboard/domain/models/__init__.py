"""
Domain models for the task board.
This module exports all domain entities, value objects and exceptions.
"""

from .base import (
    BaseEntity,
    ValueObject,
    Email,
    DomainException,
    ValidationError,
    EntityNotFoundError,
    DuplicateEntityError,
    AuthenticationError,
    TokenInvalidError,
    TokenExpiredError,
    AuthorizationError,
)
from .user import User, UserRole
from .task import Task, TaskStatus

__all__ = [
    "BaseEntity",
    "ValueObject",
    "Email",
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "AuthenticationError",
    "TokenInvalidError",
    "TokenExpiredError",
    "AuthorizationError",
    "User",
    "UserRole",
    "Task",
    "TaskStatus",
]
