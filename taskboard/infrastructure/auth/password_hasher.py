"""
bcrypt password hashing.
"""

import bcrypt

from taskboard.domain.models.base import ValidationError
from taskboard.domain.services.auth_service import PasswordHasher

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    """Salted bcrypt hashing with a configurable cost factor."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def _encode(self, password: str) -> bytes:
        if not isinstance(password, str):
            raise ValidationError("Password must be a string", "password")
        if not password:
            raise ValidationError("Password cannot be empty", "password")
        encoded = password.encode('utf-8')
        if len(encoded) > BCRYPT_MAX_BYTES:
            raise ValidationError(
                f"Password too long (max {BCRYPT_MAX_BYTES} bytes)", "password"
            )
        return encoded

    def hash_password(self, password: str) -> str:
        """Hash a password with a fresh salt."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._encode(password), salt).decode('utf-8')

    def verify_password(self, password: str, hashed_password: str) -> bool:
        """Verify a password against its hash. Malformed hashes never verify."""
        if not isinstance(password, str) or not password:
            return False
        if not isinstance(hashed_password, str) or not hashed_password:
            return False
        encoded = password.encode('utf-8')
        if len(encoded) > BCRYPT_MAX_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, hashed_password.encode('utf-8'))
        except ValueError:
            return False
