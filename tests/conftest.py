"""
Shared pytest fixtures.
"""

from typing import Callable, Dict

import pytest
from fastapi.testclient import TestClient

from taskboard.config import Settings
from taskboard.infrastructure.auth.jwt_handler import JWTHandler
from taskboard.main import create_application
from tests.fakes import InMemoryTaskRepository, InMemoryUserRepository, PlainPasswordHasher

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        _env_file=None,
        environment="testing",
        debug=False,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        auto_create_tables=True,
        jwt_secret_key=TEST_SECRET,
        jwt_access_token_expire_minutes=60,
        bcrypt_rounds=4,
        first_user_is_admin=False,
    )


@pytest.fixture
def jwt_handler(settings) -> JWTHandler:
    return JWTHandler(settings=settings)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def task_repository() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def password_hasher() -> PlainPasswordHasher:
    return PlainPasswordHasher()


@pytest.fixture
def app(settings):
    return create_application(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client) -> Callable[..., Dict]:
    """Register a user through the API and return the response body."""

    def _register(email: str, password: str = "secret123", name: str = "Test User") -> Dict:
        response = client.post(
            "/auth/register",
            json={"name": name, "email": email, "password": password}
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def login(client) -> Callable[..., Dict[str, str]]:
    """Log in through the API and return ready-to-use auth headers."""

    def _login(email: str, password: str = "secret123") -> Dict[str, str]:
        response = client.post("/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _login


@pytest.fixture
def auth_headers(register, login) -> Callable[..., Dict[str, str]]:
    """Register and log in a user in one step."""

    def _auth_headers(email: str, password: str = "secret123") -> Dict[str, str]:
        register(email, password)
        return login(email, password)

    return _auth_headers
