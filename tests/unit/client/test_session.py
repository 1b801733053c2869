"""
Unit tests for the client token store and session.
"""

import os
import stat
from datetime import timedelta

import pytest
from taskboard.client.session import ClientSession, TokenStore
from taskboard.domain.models.user import UserRole
from taskboard.infrastructure.auth.jwt_handler import JWTHandler


@pytest.fixture
def store(tmp_path):
    return TokenStore(tmp_path / "nested" / "token")


@pytest.fixture
def handler():
    return JWTHandler(secret_key="client-test-secret-key-long-enough", algorithm="HS256", expire_minutes=30)


class TestTokenStore:
    """Test cases for TokenStore."""

    def test_empty(self, store):
        assert store.get() is None

    def test_save_and_get(self, store):
        store.save("abc.def.ghi")
        assert store.get() == "abc.def.ghi"

    def test_owner_only_permissions(self, store):
        store.save("abc.def.ghi")
        mode = stat.S_IMODE(os.stat(store.path).st_mode)
        assert mode == 0o600

    def test_overwrite(self, store):
        store.save("first")
        store.save("second")
        assert store.get() == "second"

    def test_clear(self, store):
        store.save("abc.def.ghi")
        store.clear()
        store.clear()
        assert store.get() is None


class TestClientSession:
    """Test cases for ClientSession."""

    def test_no_token(self, store):
        session = ClientSession(store)

        assert session.load() is None
        assert session.current_user is None
        assert not session.is_authenticated
        assert not session.is_admin
        assert not session.is_expired
        assert session.authorization_header() == {}

    def test_load_previous_token(self, store, handler):
        token = handler.issue_token("user-1", "alice@example.com", UserRole.USER)
        store.save(token)

        session = ClientSession(store)
        assert session.token is None
        session.load()

        assert session.token == token
        assert session.is_authenticated
        assert session.current_user.id == "user-1"
        assert session.current_user.email == "alice@example.com"
        assert session.authorization_header() == {"Authorization": f"Bearer {token}"}

    def test_admin_from_claims(self, store, handler):
        session = ClientSession(store)
        session.set_token(handler.issue_token("user-1", "root@example.com", UserRole.ADMIN))

        assert session.is_admin
        assert session.current_user.role == "admin"
        assert store.get() == session.token

    def test_expired_token(self, store, handler):
        session = ClientSession(store)
        session.set_token(handler.issue_token(
            "user-1", "alice@example.com", UserRole.ADMIN, expires_delta=timedelta(minutes=-1)
        ))

        assert session.current_user is not None
        assert session.is_expired
        assert not session.is_authenticated
        assert not session.is_admin

    def test_expires_at(self, store, handler):
        session = ClientSession(store)
        session.set_token(handler.issue_token("user-1", "alice@example.com", UserRole.USER))

        expires_at = session.current_user.expires_at
        assert expires_at is not None
        assert expires_at.tzinfo is not None

    def test_undecodable_token(self, store):
        session = ClientSession(store)
        session.set_token("not-a-jwt")

        assert session.current_user is None
        assert not session.is_authenticated

    def test_logout_clears_memory_and_disk(self, store, handler):
        session = ClientSession(store)
        session.set_token(handler.issue_token("user-1", "alice@example.com", UserRole.USER))

        session.logout()

        assert session.token is None
        assert store.get() is None
        assert not session.is_authenticated
