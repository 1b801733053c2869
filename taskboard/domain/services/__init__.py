"""
Domain services.
Business logic that does not belong to a single entity.
"""

from .auth_service import PasswordHasher, TokenService, TokenClaims

__all__ = [
    "PasswordHasher",
    "TokenService",
    "TokenClaims",
]
