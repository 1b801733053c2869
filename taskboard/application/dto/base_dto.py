"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
    )


class RequestDTO(BaseDTO):
    """
    Base class for request DTOs.
    Unknown fields are rejected so handlers only ever see the declared shape.
    """

    model_config = ConfigDict(extra="forbid")


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""
    pass


class TimestampedResponseDTO(ResponseDTO):
    """Response carrying entity identity and timestamps."""

    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ErrorResponseDTO(ResponseDTO):
    """Shape of every error body returned by the API."""

    error: str
    message: str
