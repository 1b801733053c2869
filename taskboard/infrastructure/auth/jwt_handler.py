"""
JWT token handler.
Issues access tokens at login and validates them on every protected request.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any

from jose import ExpiredSignatureError, JWTError, jwt as jose_jwt

from taskboard.config import Settings, get_settings
from taskboard.domain.models.base import TokenExpiredError, TokenInvalidError
from taskboard.domain.models.user import UserRole
from taskboard.domain.services.auth_service import TokenClaims, TokenService

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ("sub", "email", "role", "exp")


class JWTHandler(TokenService):
    """Handles JWT token creation, validation and user extraction."""

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        expire_minutes: Optional[int] = None,
        settings: Optional[Settings] = None
    ):
        settings = settings or get_settings()
        self.jwt_secret = secret_key or settings.jwt_secret_key
        self.jwt_algorithm = algorithm or settings.jwt_algorithm
        self.expire_minutes = expire_minutes or settings.jwt_access_token_expire_minutes

    def issue_token(
        self,
        subject: str,
        email: str,
        role: UserRole,
        expires_delta: Optional[timedelta] = None
    ) -> str:
        """
        Generate a signed access token.

        Args:
            subject: User ID
            email: User email
            role: User role
            expires_delta: Overrides the configured lifetime

        Returns:
            JWT token string
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.expire_minutes))

        payload = {
            "sub": subject,
            "email": email,
            "role": UserRole(role).value,
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
        }

        return jose_jwt.encode(payload, self.jwt_secret, algorithm=self.jwt_algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        """
        Verify signature and expiry and return the raw payload.

        Raises:
            TokenExpiredError: If the token has expired
            TokenInvalidError: If the token is malformed, badly signed or
                misses a required claim
        """
        if not isinstance(token, str) or not token.strip():
            raise TokenInvalidError("Missing token")

        token = token.strip()
        # Remove 'Bearer ' prefix if present
        if token[:7].lower() == "bearer ":
            token = token[7:].strip()

        try:
            payload = jose_jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                options={"verify_exp": True, "verify_aud": False}
            )
        except ExpiredSignatureError:
            raise TokenExpiredError()
        except JWTError as e:
            logger.debug(f"Rejected token: {e}")
            raise TokenInvalidError()

        for claim in REQUIRED_CLAIMS:
            if claim not in payload or payload[claim] in (None, ""):
                raise TokenInvalidError(f"Token missing {claim} claim")

        return payload

    def verify_token(self, token: str) -> TokenClaims:
        """
        Verify a token and return typed claims.
        """
        payload = self.decode(token)

        try:
            role = UserRole(payload["role"])
        except ValueError:
            raise TokenInvalidError("Token carries an unknown role")

        issued_at = payload.get("iat")
        return TokenClaims(
            subject=str(payload["sub"]),
            email=str(payload["email"]),
            role=role,
            issued_at=datetime.fromtimestamp(issued_at, tz=timezone.utc) if issued_at else None,
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            raw=payload,
        )

    def is_token_valid(self, token: str) -> bool:
        """
        Check if token is valid without raising exceptions.
        """
        try:
            self.verify_token(token)
            return True
        except (TokenInvalidError, TokenExpiredError):
            return False
