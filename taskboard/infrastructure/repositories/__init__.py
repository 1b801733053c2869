"""
SQLAlchemy implementations of the domain repository interfaces.
"""

from .task_repository import SQLAlchemyTaskRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyTaskRepository",
    "SQLAlchemyUserRepository",
]
