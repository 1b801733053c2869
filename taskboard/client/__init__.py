"""
Python client for the taskboard API.
"""

from .api import ApiError, TaskboardClient
from .session import ClientSession, SessionUser, TokenStore

__all__ = ["ApiError", "TaskboardClient", "ClientSession", "SessionUser", "TokenStore"]
