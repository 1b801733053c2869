"""
Authentication middleware for FastAPI.
Handles JWT token validation and user context injection.
"""

import logging
from typing import Iterable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from taskboard.domain.models.base import AuthenticationError
from taskboard.infrastructure.auth.jwt_handler import JWTHandler
from taskboard.infrastructure.web.middleware.error_handler import unauthorized_response

logger = logging.getLogger(__name__)

PUBLIC_PATHS = (
    "/",
    "/health",
    "/docs",
    "/docs/oauth2-redirect",
    "/redoc",
    "/openapi.json",
    "/auth/login",
    "/auth/register",
)


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """
    Middleware for JWT authentication.

    Requests to anything outside the public endpoints must carry a valid
    bearer token; otherwise they are answered with 401 before any route runs.
    """

    def __init__(
        self,
        app,
        jwt_handler: Optional[JWTHandler] = None,
        api_prefix: str = "",
        public_paths: Iterable[str] = PUBLIC_PATHS
    ):
        super().__init__(app)
        self.jwt_handler = jwt_handler or JWTHandler()
        prefix = api_prefix.rstrip("/")

        # Public endpoints that don't require authentication
        self.public_endpoints = {"/"}
        for path in public_paths:
            self.public_endpoints.add(path)
            if prefix:
                self.public_endpoints.add(f"{prefix}{path}" if path != "/" else prefix)

    async def dispatch(self, request: Request, call_next):
        """Process request through authentication middleware."""
        # Skip authentication for public endpoints and CORS preflight
        if request.method == "OPTIONS" or self._is_public_endpoint(request.url.path):
            return await call_next(request)

        token = self._extract_token(request)
        if not token:
            return unauthorized_response("Authentication required")

        try:
            identity = self.jwt_handler.verify_token(token)
        except AuthenticationError as e:
            logger.debug(f"Rejected request to {request.url.path}: {e.message}")
            return unauthorized_response(e.message)

        # Inject user context into request state
        request.state.identity = identity

        return await call_next(request)

    def _is_public_endpoint(self, path: str) -> bool:
        """Check if endpoint is public and doesn't require authentication."""
        if path in self.public_endpoints:
            return True
        return path.rstrip("/") in self.public_endpoints

    def _extract_token(self, request: Request) -> Optional[str]:
        """Extract JWT token from Authorization header."""
        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None

        scheme, _, token = auth_header.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            return None

        return token.strip()
