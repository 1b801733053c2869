"""
Mappers between domain entities and database models.
"""

from .task_mapper import TaskMapper
from .user_mapper import UserMapper

__all__ = [
    "TaskMapper",
    "UserMapper",
]
