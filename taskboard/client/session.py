"""
Client-side authentication state.

The issued token is persisted by a TokenStore and exposed through an
explicit ClientSession object that callers pass around.
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from jose import jwt
from jose.exceptions import JWTError

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_PATH = Path.home() / ".taskboard" / "token"


class TokenStore:
    """File-backed persistence for the bearer token."""

    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path) if path else DEFAULT_TOKEN_PATH

    def save(self, token: str) -> None:
        """Write the token, readable by the owner only."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(token)
        os.chmod(self.path, 0o600)

    def get(self) -> Optional[str]:
        if not self.path.exists():
            return None
        token = self.path.read_text(encoding="utf-8").strip()
        return token or None

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()


@dataclass(frozen=True)
class SessionUser:
    """Identity derived from the stored token, for display and UI gating only."""
    id: str
    email: str
    role: str
    expires_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class ClientSession:
    """
    Authentication state of one client.

    Call load() on startup to pick up a previously stored token and
    logout() to discard it. The token is decoded without signature
    verification; the server remains the only authority on its validity.
    """

    def __init__(self, store: Optional[TokenStore] = None):
        self.store = store or TokenStore()
        self._token: Optional[str] = None

    @property
    def token(self) -> Optional[str]:
        return self._token

    def load(self) -> Optional[str]:
        """Load the persisted token into the session."""
        self._token = self.store.get()
        return self._token

    def set_token(self, token: str) -> None:
        """Remember a freshly issued token and persist it."""
        self._token = token
        self.store.save(token)

    def logout(self) -> None:
        """Forget the token in memory and on disk."""
        self._token = None
        self.store.clear()

    @property
    def current_user(self) -> Optional[SessionUser]:
        """Claims of the held token, or None when absent or undecodable."""
        if not self._token:
            return None

        try:
            claims = jwt.get_unverified_claims(self._token)
        except JWTError:
            logger.debug("Stored token could not be decoded")
            return None

        subject = claims.get("sub")
        if not subject:
            return None

        expires_at = None
        exp = claims.get("exp")
        if isinstance(exp, (int, float)):
            expires_at = datetime.fromtimestamp(exp, tz=timezone.utc)

        return SessionUser(
            id=str(subject),
            email=str(claims.get("email", "")),
            role=str(claims.get("role", "user")),
            expires_at=expires_at
        )

    @property
    def is_authenticated(self) -> bool:
        user = self.current_user
        return user is not None and not self._expired(user)

    @property
    def is_admin(self) -> bool:
        return self.is_authenticated and self.current_user.is_admin

    @property
    def is_expired(self) -> bool:
        user = self.current_user
        return user is not None and self._expired(user)

    @staticmethod
    def _expired(user: SessionUser) -> bool:
        if user.expires_at is None:
            return False
        return user.expires_at <= datetime.now(timezone.utc)

    def authorization_header(self) -> dict:
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}
