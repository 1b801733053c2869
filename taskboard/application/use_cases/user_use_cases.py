"""
User administration use cases.
"""

import logging
from typing import Optional

from taskboard.application.dto.user_dto import UserListResponseDTO, UserResponseDTO
from taskboard.application.use_cases.base_use_case import BaseUseCase
from taskboard.domain.models.base import Email, EntityNotFoundError
from taskboard.domain.models.user import UserRole
from taskboard.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class ListUsersUseCase(BaseUseCase):
    """Use case for the administrative user listing."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, limit: Optional[int] = None, offset: int = 0) -> UserListResponseDTO:
        users = await self.user_repository.get_all(limit=limit, offset=offset)
        return UserListResponseDTO(
            items=[UserResponseDTO.from_domain(user) for user in users],
            total=await self.user_repository.count(),
            admins=await self.user_repository.count_by_role(UserRole.ADMIN),
            users=await self.user_repository.count_by_role(UserRole.USER),
        )


class ChangeUserRoleUseCase(BaseUseCase):
    """
    Use case for granting or revoking a role.
    Only reachable from the management CLI, never from HTTP.
    """

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, email: str, role: UserRole) -> UserResponseDTO:
        normalized = str(Email.normalized(email))
        user = await self.user_repository.get_by_email(normalized)
        if user is None:
            raise EntityNotFoundError("User", normalized)

        user.change_role(UserRole(role))
        saved = await self.user_repository.save(user)
        logger.info(f"User {saved.id} role changed to {saved.role.value}")
        return UserResponseDTO.from_domain(saved)
