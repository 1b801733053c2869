"""
Unit tests for registration and login use cases.
"""

import pytest
from taskboard.application.dto.auth_dto import LoginRequestDTO, RegisterRequestDTO
from taskboard.application.use_cases.auth_use_cases import (
    INVALID_CREDENTIALS,
    LoginUseCase,
    RegisterUserUseCase,
)
from taskboard.domain.models.base import AuthenticationError, DuplicateEntityError
from taskboard.domain.models.user import UserRole


def register_request(email="alice@example.com", password="secret123", name="Alice"):
    return RegisterRequestDTO(name=name, email=email, password=password)


class TestRegisterUserUseCase:
    """Test cases for RegisterUserUseCase."""

    async def test_register_success(self, user_repository, password_hasher):
        use_case = RegisterUserUseCase(user_repository, password_hasher)

        result = await use_case.execute(register_request())

        assert result.id
        assert result.email == "alice@example.com"
        stored = await user_repository.get_by_id(result.id)
        assert stored.role == UserRole.USER
        assert stored.password_hash != "secret123"
        assert password_hasher.verify_password("secret123", stored.password_hash)

    async def test_register_normalizes_email(self, user_repository, password_hasher):
        use_case = RegisterUserUseCase(user_repository, password_hasher)

        result = await use_case.execute(register_request(email="Alice@Example.COM"))

        assert result.email == "alice@example.com"

    async def test_duplicate_email(self, user_repository, password_hasher):
        use_case = RegisterUserUseCase(user_repository, password_hasher)
        await use_case.execute(register_request())

        with pytest.raises(DuplicateEntityError) as exc_info:
            await use_case.execute(register_request(email="ALICE@example.com", name="Other"))

        assert exc_info.value.code == "CONFLICT"
        assert await user_repository.count() == 1

    async def test_first_user_is_user_by_default(self, user_repository, password_hasher):
        use_case = RegisterUserUseCase(user_repository, password_hasher)

        result = await use_case.execute(register_request())

        assert (await user_repository.get_by_id(result.id)).role == UserRole.USER

    async def test_first_user_admin_bootstrap(self, user_repository, password_hasher):
        use_case = RegisterUserUseCase(user_repository, password_hasher, first_user_is_admin=True)

        first = await use_case.execute(register_request())
        second = await use_case.execute(register_request(email="bob@example.com", name="Bob"))

        assert (await user_repository.get_by_id(first.id)).role == UserRole.ADMIN
        assert (await user_repository.get_by_id(second.id)).role == UserRole.USER

    async def test_response_has_no_secret_material(self, user_repository, password_hasher):
        use_case = RegisterUserUseCase(user_repository, password_hasher)

        result = await use_case.execute(register_request())

        assert set(result.model_dump()) == {"id", "email"}


class TestLoginUseCase:
    """Test cases for LoginUseCase."""

    @pytest.fixture
    async def registered(self, user_repository, password_hasher):
        use_case = RegisterUserUseCase(user_repository, password_hasher)
        return await use_case.execute(register_request())

    async def test_login_success(self, registered, user_repository, password_hasher, jwt_handler):
        use_case = LoginUseCase(user_repository, password_hasher, jwt_handler)

        result = await use_case.execute(
            LoginRequestDTO(email="alice@example.com", password="secret123")
        )

        assert result.token_type == "bearer"
        claims = jwt_handler.verify_token(result.access_token)
        assert claims.user_id == registered.id
        assert claims.email == "alice@example.com"
        assert claims.role == UserRole.USER

    async def test_login_email_case_insensitive(self, registered, user_repository, password_hasher, jwt_handler):
        use_case = LoginUseCase(user_repository, password_hasher, jwt_handler)

        result = await use_case.execute(
            LoginRequestDTO(email="ALICE@example.com", password="secret123")
        )

        assert jwt_handler.verify_token(result.access_token).user_id == registered.id

    async def test_wrong_password_and_unknown_email_fail_identically(
        self, registered, user_repository, password_hasher, jwt_handler
    ):
        use_case = LoginUseCase(user_repository, password_hasher, jwt_handler)

        with pytest.raises(AuthenticationError) as wrong_password:
            await use_case.execute(LoginRequestDTO(email="alice@example.com", password="wrong-pass"))
        with pytest.raises(AuthenticationError) as unknown_email:
            await use_case.execute(LoginRequestDTO(email="nobody@example.com", password="secret123"))

        assert wrong_password.value.message == unknown_email.value.message == INVALID_CREDENTIALS
        assert wrong_password.value.code == unknown_email.value.code
