"""
Unit tests for the JWT handler.
"""

import pytest
from datetime import datetime, timedelta, timezone
from jose import jwt

from taskboard.domain.models.base import AuthenticationError, TokenExpiredError, TokenInvalidError
from taskboard.domain.models.user import UserRole
from taskboard.infrastructure.auth.jwt_handler import JWTHandler

SECRET = "unit-test-secret-key-with-enough-length"


@pytest.fixture
def handler():
    return JWTHandler(secret_key=SECRET, algorithm="HS256", expire_minutes=60)


class TestJWTHandler:
    """Test cases for token issuance and verification."""

    def test_issue_and_verify(self, handler):
        token = handler.issue_token("user-1", "alice@example.com", UserRole.ADMIN)

        claims = handler.verify_token(token)

        assert claims.user_id == "user-1"
        assert claims.email == "alice@example.com"
        assert claims.role == UserRole.ADMIN
        assert claims.is_admin
        assert claims.issued_at is not None

    def test_lifetime_matches_configuration(self, handler):
        before = datetime.now(timezone.utc)
        claims = handler.verify_token(handler.issue_token("u", "a@example.com", UserRole.USER))

        lifetime = claims.expires_at - before
        assert timedelta(minutes=59) < lifetime <= timedelta(minutes=60, seconds=1)

    def test_payload_claims(self, handler):
        token = handler.issue_token("user-1", "alice@example.com", "user")
        payload = jwt.get_unverified_claims(token)

        assert set(payload) == {"sub", "email", "role", "iat", "exp"}
        assert payload["role"] == "user"

    def test_bearer_prefix_is_stripped(self, handler):
        token = handler.issue_token("user-1", "alice@example.com", UserRole.USER)
        assert handler.verify_token(f"Bearer {token}").user_id == "user-1"

    def test_expired_token(self, handler):
        token = handler.issue_token(
            "user-1", "alice@example.com", UserRole.USER,
            expires_delta=timedelta(seconds=-30)
        )

        with pytest.raises(TokenExpiredError):
            handler.verify_token(token)

    def test_wrong_secret(self, handler):
        other = JWTHandler(secret_key="another-secret-key-of-decent-length", algorithm="HS256")
        token = other.issue_token("user-1", "alice@example.com", UserRole.USER)

        with pytest.raises(TokenInvalidError):
            handler.verify_token(token)

    def test_tampered_token(self, handler):
        token = handler.issue_token("user-1", "alice@example.com", UserRole.USER)
        header, payload, signature = token.split(".")
        tampered = ".".join([header, payload, signature[::-1]])

        with pytest.raises(TokenInvalidError):
            handler.verify_token(tampered)

    @pytest.mark.parametrize("token", ["", "   ", "garbage", "a.b.c"])
    def test_malformed_token(self, handler, token):
        with pytest.raises(TokenInvalidError):
            handler.verify_token(token)

    def test_missing_claim(self, handler):
        exp = datetime.now(timezone.utc) + timedelta(minutes=5)
        token = jwt.encode({"sub": "user-1", "exp": exp}, SECRET, algorithm="HS256")

        with pytest.raises(TokenInvalidError):
            handler.verify_token(token)

    def test_unknown_role(self, handler):
        exp = datetime.now(timezone.utc) + timedelta(minutes=5)
        token = jwt.encode(
            {"sub": "user-1", "email": "a@example.com", "role": "root", "exp": exp},
            SECRET,
            algorithm="HS256"
        )

        with pytest.raises(TokenInvalidError):
            handler.verify_token(token)

    def test_errors_are_authentication_errors(self):
        assert issubclass(TokenExpiredError, AuthenticationError)
        assert issubclass(TokenInvalidError, AuthenticationError)
        assert TokenExpiredError().code == TokenInvalidError().code == "UNAUTHORIZED"

    def test_is_token_valid(self, handler):
        token = handler.issue_token("user-1", "alice@example.com", UserRole.USER)

        assert handler.is_token_valid(token)
        assert not handler.is_token_valid("garbage")
