"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

from sqlalchemy import (
    Column, String, DateTime, Text, ForeignKey, Enum as SQLEnum, Index
)
from sqlalchemy.orm import relationship

from taskboard.domain.models.task import TaskStatus
from taskboard.domain.models.user import UserRole
from taskboard.infrastructure.db.database import Base


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class UserModel(Base):
    """User credentials table"""
    __tablename__ = 'users'

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        SQLEnum(UserRole, name="user_role", values_callable=_enum_values),
        nullable=False,
        default=UserRole.USER
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    # Relationships
    tasks = relationship("TaskModel", back_populates="owner", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_users_role', 'role'),
    )


class TaskModel(Base):
    """Task table"""
    __tablename__ = 'tasks'

    id = Column(String(36), primary_key=True)
    owner_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    title = Column(String(255), nullable=False)
    description = Column(Text)
    status = Column(
        SQLEnum(TaskStatus, name="task_status", values_callable=_enum_values),
        nullable=False,
        default=TaskStatus.PENDING
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    # Relationships
    owner = relationship("UserModel", back_populates="tasks")

    __table_args__ = (
        Index('idx_tasks_owner_created', 'owner_id', 'created_at'),
        Index('idx_tasks_owner_status', 'owner_id', 'status'),
    )
