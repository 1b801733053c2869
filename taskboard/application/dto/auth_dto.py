"""
Authentication DTOs for the application layer.
"""

from pydantic import EmailStr, Field, field_validator

from taskboard.domain.models.user import UserRole
from .base_dto import RequestDTO, ResponseDTO


class RegisterRequestDTO(RequestDTO):
    """DTO for registration requests."""

    name: str = Field(min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(description="User email address")
    password: str = Field(min_length=6, max_length=72, description="Password")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject whitespace-only names."""
        v = v.strip()
        if not v:
            raise ValueError('Name is required')
        return v


class LoginRequestDTO(RequestDTO):
    """DTO for login requests."""

    email: EmailStr = Field(description="User email address")
    password: str = Field(min_length=1, description="Password")


class RegisterResponseDTO(ResponseDTO):
    """DTO returned after a successful registration."""

    id: str
    email: str


class TokenResponseDTO(ResponseDTO):
    """DTO carrying an issued bearer token."""

    access_token: str
    token_type: str = "bearer"


class ProfileResponseDTO(ResponseDTO):
    """Identity of the authenticated caller as carried by the token."""

    id: str
    email: str
    role: UserRole
