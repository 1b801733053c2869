"""
Authentication infrastructure module.
Handles password hashing, JWT issuance and validation, and authorization.
"""

from .jwt_handler import JWTHandler
from .password_hasher import BcryptPasswordHasher
from .dependencies import (
    AdminIdentity,
    CurrentIdentity,
    get_current_identity,
    get_current_user_id,
    get_jwt_handler,
    get_password_hasher,
    get_task_repository,
    get_user_repository,
    require_admin,
)

__all__ = [
    "JWTHandler",
    "BcryptPasswordHasher",
    "AdminIdentity",
    "CurrentIdentity",
    "get_current_identity",
    "get_current_user_id",
    "get_jwt_handler",
    "get_password_hasher",
    "get_task_repository",
    "get_user_repository",
    "require_admin",
]
