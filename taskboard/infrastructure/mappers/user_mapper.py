"""
User mapper for converting between domain entities and database models.
"""

from datetime import datetime, timezone
from typing import Optional

from taskboard.domain.models.base import Email
from taskboard.domain.models.user import User, UserRole
from taskboard.infrastructure.db.models import UserModel


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes read back from stores without tz support."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class UserMapper:
    """Maps between User domain entity and UserModel database model."""

    def domain_to_model(self, user: User) -> UserModel:
        """Convert User domain entity to UserModel."""
        return UserModel(
            id=user.id,
            name=user.name,
            email=str(user.email),
            password_hash=user.password_hash,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def model_to_domain(self, model: UserModel) -> User:
        """Convert UserModel to User domain entity."""
        return User(
            id=model.id,
            name=model.name,
            email=Email(model.email),
            password_hash=model.password_hash,
            role=UserRole(model.role) if model.role else UserRole.USER,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )
