"""
Authentication router.
Handles user registration, login and profile lookup.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from taskboard.application.dto.auth_dto import (
    LoginRequestDTO,
    ProfileResponseDTO,
    RegisterRequestDTO,
    RegisterResponseDTO,
    TokenResponseDTO,
)
from taskboard.application.dto.base_dto import ErrorResponseDTO
from taskboard.application.use_cases.auth_use_cases import LoginUseCase, RegisterUserUseCase
from taskboard.config import Settings
from taskboard.domain.models.base import DuplicateEntityError
from taskboard.infrastructure.auth import (
    CurrentIdentity,
    JWTHandler,
    BcryptPasswordHasher,
    get_jwt_handler,
    get_password_hasher,
    get_user_repository,
)
from taskboard.infrastructure.auth.dependencies import get_app_settings
from taskboard.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from taskboard.infrastructure.web.middleware.error_handler import error_body


router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterResponseDTO,
    responses={401: {"model": ErrorResponseDTO, "description": "Email already registered"}}
)
async def register(
    request: RegisterRequestDTO,
    repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)],
    password_hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
    settings: Annotated[Settings, Depends(get_app_settings)]
):
    """
    Register a new user account.

    - **name**: Display name
    - **email**: Valid email address, unique across accounts
    - **password**: Password with at least 6 characters
    """
    use_case = RegisterUserUseCase(
        repository,
        password_hasher,
        first_user_is_admin=settings.first_user_is_admin
    )
    try:
        return await use_case.execute(request)
    except DuplicateEntityError as e:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=error_body(e.code, e.message)
        )


@router.post(
    "/login",
    response_model=TokenResponseDTO,
    responses={401: {"model": ErrorResponseDTO, "description": "Invalid credentials"}}
)
async def login(
    request: LoginRequestDTO,
    repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)],
    password_hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)]
):
    """
    Authenticate user and return an access token.

    - **email**: User email address
    - **password**: User password
    """
    use_case = LoginUseCase(repository, password_hasher, jwt_handler)
    return await use_case.execute(request)


@router.get("/profile", response_model=ProfileResponseDTO)
async def get_profile(identity: CurrentIdentity):
    """
    Get the identity carried by the caller's token.

    Requires authentication.
    """
    return ProfileResponseDTO(
        id=identity.user_id,
        email=identity.email,
        role=identity.role,
    )
