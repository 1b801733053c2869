"""
User administration router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from taskboard.application.dto.user_dto import UserListResponseDTO
from taskboard.application.use_cases.user_use_cases import ListUsersUseCase
from taskboard.infrastructure.auth import AdminIdentity, get_user_repository
from taskboard.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


router = APIRouter()


@router.get("", response_model=UserListResponseDTO)
async def list_users(
    _: AdminIdentity,
    repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)],
    limit: int = Query(100, ge=1, le=500, description="Maximum users to return"),
    offset: int = Query(0, ge=0, description="Users to skip")
):
    """
    List registered users with role counts.

    Requires the admin role.
    """
    return await ListUsersUseCase(repository).execute(limit=limit, offset=offset)
