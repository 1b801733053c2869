"""
Unit tests for TokenClaims.
"""

from taskboard.domain.models.user import UserRole
from taskboard.domain.services.auth_service import TokenClaims


class TestTokenClaims:

    def test_user_id_is_subject(self):
        claims = TokenClaims(subject="u1", email="a@example.com", role=UserRole.USER)
        assert claims.user_id == "u1"
        assert not claims.is_admin

    def test_admin(self):
        claims = TokenClaims(subject="u1", email="a@example.com", role=UserRole.ADMIN)
        assert claims.is_admin

    def test_raw_payload_ignored_in_equality(self):
        first = TokenClaims(subject="u1", email="a@example.com", role=UserRole.USER, raw={"x": 1})
        second = TokenClaims(subject="u1", email="a@example.com", role=UserRole.USER, raw={"x": 2})
        assert first == second
