"""
Base entity and value objects for the domain layer.
This module contains the foundational classes for all domain entities
and the domain exception hierarchy.
"""

from datetime import datetime, timezone
from typing import Optional, Any
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import uuid


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Generate a new entity identifier."""
    return str(uuid.uuid4())


@dataclass
class BaseEntity(ABC):
    """
    Base class for all domain entities.
    Provides common attributes and behavior for all entities.
    """

    id: Optional[str] = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        """Initialize entity after creation."""
        if self.created_at is None:
            self.created_at = utc_now()
        if self.updated_at is None:
            self.updated_at = self.created_at

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and are of the same type."""
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        if self.id is None:
            return hash(id(self))
        return hash((self.__class__.__name__, self.id))

    def mark_as_updated(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = utc_now()

    @property
    def is_new(self) -> bool:
        """Check if entity is new (not persisted)."""
        return self.id is None

    def validate(self) -> None:
        """
        Validate the entity's state.
        Should be overridden by subclasses to implement specific validation rules.
        Raises ValidationError if the entity is in an invalid state.
        """
        pass


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when input or entity validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, "NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class DuplicateEntityError(DomainException):
    """Exception raised when trying to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: Any, message: Optional[str] = None):
        message = message or f"{entity_type} with this {field} already exists"
        super().__init__(message, "CONFLICT")
        self.entity_type = entity_type
        self.field = field
        self.value = value


class AuthenticationError(DomainException):
    """Exception raised when credentials or tokens are rejected."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, "UNAUTHORIZED")


class TokenInvalidError(AuthenticationError):
    """Token is malformed, carries a bad signature or misses required claims."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class TokenExpiredError(AuthenticationError):
    """Token signature is valid but its expiry has passed."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class AuthorizationError(DomainException):
    """Exception raised when an authenticated caller lacks a required role."""

    def __init__(self, message: str = "Access forbidden"):
        super().__init__(message, "FORBIDDEN")


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.
    Value objects are immutable and are compared by their values.
    """

    def __post_init__(self):
        """Validate value object after creation."""
        self.validate()

    @abstractmethod
    def validate(self) -> None:
        """Validate the value object's state."""
        pass


@dataclass(frozen=True)
class Email(ValueObject):
    """Email value object with validation."""

    value: str

    def validate(self) -> None:
        """Validate email format."""
        if not self.value:
            raise ValidationError("Email cannot be empty", "email")

        if self.value != self.value.strip().lower():
            raise ValidationError("Email must be normalized", "email")

        parts = self.value.split('@')
        if len(parts) != 2 or not parts[0] or '.' not in parts[1]:
            raise ValidationError(f"Invalid email format: {self.value}", "email")

        if len(self.value) > 255:
            raise ValidationError("Email too long (max 255 characters)", "email")

    @classmethod
    def normalized(cls, raw: str) -> "Email":
        """Build an Email from user input, trimming and lower-casing it."""
        if not isinstance(raw, str):
            raise ValidationError("Email must be a string", "email")
        return cls(raw.strip().lower())

    def __str__(self) -> str:
        return self.value
