"""
User repository interface.
Defines the contract for credential store operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from taskboard.domain.models.user import User, UserRole


class UserRepository(ABC):
    """
    Repository interface for User entity.
    Implementations must enforce one identity per email.
    """

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Persist a new user or update an existing one.
        Raises DuplicateEntityError if the email is already taken.
        """
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID. Returns None if not found."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by normalized email. Returns None if not found."""
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check if a user with the given normalized email exists."""
        pass

    @abstractmethod
    async def get_all(self, limit: Optional[int] = None, offset: int = 0) -> List[User]:
        """Get all users, newest first."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Total number of users."""
        pass

    @abstractmethod
    async def count_by_role(self, role: UserRole) -> int:
        """Number of users holding the given role."""
        pass
