"""
Authentication dependencies for FastAPI.
Provides the authenticated identity and role checks to route handlers.
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.config import Settings
from taskboard.domain.models.base import AuthenticationError, AuthorizationError
from taskboard.domain.services.auth_service import TokenClaims
from taskboard.infrastructure.auth.jwt_handler import JWTHandler
from taskboard.infrastructure.auth.password_hasher import BcryptPasswordHasher
from taskboard.infrastructure.db.database import get_db
from taskboard.infrastructure.repositories.task_repository import SQLAlchemyTaskRepository
from taskboard.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

logger = logging.getLogger(__name__)

# Security scheme; missing credentials are reported as 401 by get_current_identity
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Dependency to get the settings the application was built with."""
    return request.app.state.settings


def get_jwt_handler(request: Request) -> JWTHandler:
    """Dependency to get JWT handler."""
    return request.app.state.jwt_handler


def get_password_hasher(request: Request) -> BcryptPasswordHasher:
    """Dependency to get the password hasher."""
    return request.app.state.password_hasher


def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_db)]
) -> SQLAlchemyUserRepository:
    """Dependency to get user repository."""
    return SQLAlchemyUserRepository(session)


def get_task_repository(
    session: Annotated[AsyncSession, Depends(get_db)]
) -> SQLAlchemyTaskRepository:
    """Dependency to get task repository."""
    return SQLAlchemyTaskRepository(session)


async def get_current_identity(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)]
) -> TokenClaims:
    """
    FastAPI dependency to get the authenticated caller's claims.

    Reuses the identity injected by AuthenticationMiddleware when present and
    verifies the bearer token itself otherwise.

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    identity = getattr(request.state, "identity", None)
    if identity is not None:
        return identity

    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required")

    identity = jwt_handler.verify_token(credentials.credentials)
    request.state.identity = identity
    return identity


async def get_current_user_id(
    identity: Annotated[TokenClaims, Depends(get_current_identity)]
) -> str:
    """FastAPI dependency to get current authenticated user ID."""
    return identity.user_id


async def require_admin(
    identity: Annotated[TokenClaims, Depends(get_current_identity)]
) -> TokenClaims:
    """
    FastAPI dependency that only lets administrators through.

    Raises:
        AuthorizationError: If the caller is authenticated but not an admin
    """
    if not identity.is_admin:
        logger.info(f"Admin route refused for user {identity.user_id}")
        raise AuthorizationError("Administrator role required")
    return identity


CurrentIdentity = Annotated[TokenClaims, Depends(get_current_identity)]
AdminIdentity = Annotated[TokenClaims, Depends(require_admin)]
