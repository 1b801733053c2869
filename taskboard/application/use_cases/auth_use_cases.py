"""
Authentication use cases.
Registration and login against the credential store.
"""

import logging

from taskboard.application.dto.auth_dto import (
    LoginRequestDTO,
    RegisterRequestDTO,
    RegisterResponseDTO,
    TokenResponseDTO,
)
from taskboard.application.use_cases.base_use_case import BaseUseCase
from taskboard.domain.models.base import AuthenticationError, DuplicateEntityError, Email
from taskboard.domain.models.user import User, UserRole
from taskboard.domain.repositories.user_repository import UserRepository
from taskboard.domain.services.auth_service import PasswordHasher, TokenService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
EMAIL_TAKEN = "Email already exists"


class RegisterUserUseCase(BaseUseCase):
    """Use case for registering a new identity."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        first_user_is_admin: bool = False
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.first_user_is_admin = first_user_is_admin

    async def execute(self, request: RegisterRequestDTO) -> RegisterResponseDTO:
        email = Email.normalized(request.email)

        if await self.user_repository.exists_by_email(str(email)):
            raise DuplicateEntityError("User", "email", str(email), EMAIL_TAKEN)

        password_hash = await self.run_blocking(
            self.password_hasher.hash_password, request.password
        )

        role = UserRole.USER
        if self.first_user_is_admin and await self.user_repository.count() == 0:
            role = UserRole.ADMIN

        user = User.register(
            name=request.name,
            email=str(email),
            password_hash=password_hash,
            role=role,
        )
        try:
            saved = await self.user_repository.save(user)
        except DuplicateEntityError:
            raise DuplicateEntityError("User", "email", str(email), EMAIL_TAKEN)

        logger.info(f"Registered user {saved.id} with role {saved.role.value}")
        return RegisterResponseDTO(id=saved.id, email=str(saved.email))


class LoginUseCase(BaseUseCase):
    """
    Use case for exchanging credentials for a bearer token.

    Unknown email and wrong password fail with the same error so callers
    cannot probe which emails are registered.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, request: LoginRequestDTO) -> TokenResponseDTO:
        email = Email.normalized(request.email)
        user = await self.user_repository.get_by_email(str(email))

        if user is None:
            logger.info("Login rejected")
            raise AuthenticationError(INVALID_CREDENTIALS)

        verified = await self.run_blocking(
            self.password_hasher.verify_password, request.password, user.password_hash
        )
        if not verified:
            logger.info("Login rejected")
            raise AuthenticationError(INVALID_CREDENTIALS)

        token = self.token_service.issue_token(
            subject=user.id,
            email=str(user.email),
            role=user.role,
        )
        logger.info(f"User {user.id} logged in")
        return TokenResponseDTO(access_token=token)
