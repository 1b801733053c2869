"""
Authentication service contracts.
Defines password hashing and token operations used by the auth use cases.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from taskboard.domain.models.user import UserRole


@dataclass(frozen=True)
class TokenClaims:
    """Identity attributes carried by a bearer token."""

    subject: str
    email: str
    role: UserRole
    issued_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def user_id(self) -> str:
        return self.subject

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class PasswordHasher(ABC):
    """
    One-way salted hashing of plaintext passwords.
    Implementations must never compare plaintext.
    """

    @abstractmethod
    def hash_password(self, password: str) -> str:
        """
        Hash a password using a slow, salted algorithm.
        Raises ValidationError for non-string or empty input.
        """
        pass

    @abstractmethod
    def verify_password(self, password: str, hashed_password: str) -> bool:
        """
        Verify a password against its hash.
        """
        pass


class TokenService(ABC):
    """
    Issues and verifies signed, time-bound bearer tokens.
    """

    @abstractmethod
    def issue_token(self, subject: str, email: str, role: UserRole) -> str:
        """
        Generate an access token for the identity.
        """
        pass

    @abstractmethod
    def verify_token(self, token: str) -> TokenClaims:
        """
        Verify a token and return its claims.
        Raises TokenInvalidError or TokenExpiredError.
        """
        pass
