"""
Database infrastructure for the task board.
"""

from .database import Base, Database, get_database, get_db
from .models import UserModel, TaskModel

__all__ = [
    "Base",
    "Database",
    "get_database",
    "get_db",
    "UserModel",
    "TaskModel",
]
