"""
User DTOs for the application layer.
Password hashes never appear in any of these.
"""

from typing import List

from taskboard.domain.models.user import User, UserRole
from .base_dto import ResponseDTO, TimestampedResponseDTO


class UserResponseDTO(TimestampedResponseDTO):
    """Public view of a user identity."""

    name: str
    email: str
    role: UserRole

    @classmethod
    def from_domain(cls, user: User) -> "UserResponseDTO":
        return cls(
            id=user.id,
            name=user.name,
            email=str(user.email),
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserListResponseDTO(ResponseDTO):
    """Administrative listing of users with role counts."""

    items: List[UserResponseDTO]
    total: int
    admins: int
    users: int
