"""
User domain model.
Represents an identity that can authenticate and own tasks.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum

from taskboard.domain.models.base import BaseEntity, Email, ValidationError


class UserRole(str, Enum):
    """System-wide user roles."""
    ADMIN = "admin"
    USER = "user"


@dataclass(eq=False)
class User(BaseEntity):
    """
    User entity.
    Holds the display name, the unique email and the password hash. The
    plaintext password never reaches this object.
    """

    name: Optional[str] = None
    email: Optional[Email] = None
    password_hash: Optional[str] = None
    role: UserRole = UserRole.USER

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.email, str):
            self.email = Email.normalized(self.email)
        if isinstance(self.role, str) and not isinstance(self.role, UserRole):
            self.role = UserRole(self.role)
        self.validate()

    def validate(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Name is required", "name")
        if len(self.name) > 255:
            raise ValidationError("Name too long (max 255 characters)", "name")
        if self.email is None:
            raise ValidationError("Email is required", "email")
        if not self.password_hash:
            raise ValidationError("Password hash is required", "password")

    @classmethod
    def register(
        cls,
        name: str,
        email: str,
        password_hash: str,
        role: UserRole = UserRole.USER
    ) -> "User":
        """Create a new, not yet persisted, user."""
        return cls(
            name=name.strip() if isinstance(name, str) else name,
            email=Email.normalized(email),
            password_hash=password_hash,
            role=role,
        )

    def change_role(self, role: UserRole) -> None:
        """Administrative role change."""
        self.role = role
        self.mark_as_updated()

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={str(self.email)!r}, role={self.role.value!r})"
