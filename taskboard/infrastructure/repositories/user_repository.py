"""
User repository implementation using SQLAlchemy.
"""

from typing import Optional, List

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.domain.models.base import DuplicateEntityError, EntityNotFoundError, new_id
from taskboard.domain.models.user import User, UserRole
from taskboard.domain.repositories.user_repository import UserRepository
from taskboard.infrastructure.db.models import UserModel
from taskboard.infrastructure.mappers.user_mapper import UserMapper


class SQLAlchemyUserRepository(UserRepository):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.mapper = UserMapper()

    async def save(self, user: User) -> User:
        """Save a user entity."""
        if user.is_new:
            # Check for duplicate email
            if await self.exists_by_email(str(user.email)):
                raise DuplicateEntityError("User", "email", str(user.email))

            user.id = new_id()
            model = self.mapper.domain_to_model(user)
            self.session.add(model)
            try:
                await self.session.flush()
            except IntegrityError:
                # Lost a registration race on the unique email constraint
                await self.session.rollback()
                user.id = None
                raise DuplicateEntityError("User", "email", str(user.email))
            return user

        model = await self.session.get(UserModel, user.id)
        if not model:
            raise EntityNotFoundError("User", user.id)

        # Email and id are immutable
        model.name = user.name
        model.role = user.role
        model.password_hash = user.password_hash
        model.updated_at = user.updated_at
        await self.session.flush()
        return user

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        model = await self.session.get(UserModel, user_id)
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        result = await self.session.execute(
            select(UserModel).where(UserModel.email == email)
        )
        model = result.scalar_one_or_none()
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def exists_by_email(self, email: str) -> bool:
        """Check if user exists by email."""
        result = await self.session.execute(
            select(select(UserModel.id).where(UserModel.email == email).exists())
        )
        return bool(result.scalar())

    async def get_all(self, limit: Optional[int] = None, offset: int = 0) -> List[User]:
        """Get all users with optional pagination."""
        query = select(UserModel).order_by(UserModel.created_at.desc(), UserModel.id.desc())

        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return [self.mapper.model_to_domain(model) for model in result.scalars().all()]

    async def count(self) -> int:
        """Get total user count."""
        result = await self.session.execute(select(func.count(UserModel.id)))
        return result.scalar() or 0

    async def count_by_role(self, role: UserRole) -> int:
        """Get user count for a role."""
        result = await self.session.execute(
            select(func.count(UserModel.id)).where(UserModel.role == role)
        )
        return result.scalar() or 0
