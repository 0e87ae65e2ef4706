"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

import uuid

from sqlalchemy import (
    Column, String, DateTime, Text, Enum as SQLEnum,
    Index, UniqueConstraint
)
from sqlalchemy.sql import func

from taskflow.domain.models.task import TaskStatus, TaskPriority
from taskflow.domain.models.collaboration import CollaborationRole
from .database import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class UserModel(Base):
    """User accounts."""
    __tablename__ = 'users'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())


class CategoryModel(Base):
    """Task categories, private to their owner."""
    __tablename__ = 'categories'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text)
    color = Column(String(7))

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint('user_id', 'name', name='uq_categories_user_name'),
    )


class TaskModel(Base):
    """
    Tasks.
    category_id is a plain reference: deleting a category keeps it on its tasks.
    """
    __tablename__ = 'tasks'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    status = Column(SQLEnum(TaskStatus, name='task_status'), nullable=False, default=TaskStatus.TODO)
    priority = Column(SQLEnum(TaskPriority, name='task_priority'), nullable=False, default=TaskPriority.MEDIUM)
    due_date = Column(DateTime(timezone=True))
    category_id = Column(String(36))
    assigned_user_id = Column(String(36), nullable=False)
    created_by_id = Column(String(36), nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index('idx_tasks_created_by', 'created_by_id'),
        Index('idx_tasks_assigned_user', 'assigned_user_id'),
        Index('idx_tasks_category', 'category_id'),
        Index('idx_tasks_status', 'status'),
        Index('idx_tasks_title_category', 'title', 'category_id'),
    )


class TaskCollaborationModel(Base):
    """Explicit role grants on tasks."""
    __tablename__ = 'task_collaborations'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    task_id = Column(String(36), nullable=False, index=True)
    user_id = Column(String(36), nullable=False, index=True)
    role = Column(SQLEnum(CollaborationRole, name='collaboration_role'), nullable=False, default=CollaborationRole.VIEWER)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint('task_id', 'user_id', name='uq_task_collaborations_task_user'),
    )


class TokenBlacklistModel(Base):
    """Revoked access tokens, kept until they expire."""
    __tablename__ = 'token_blacklist'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    token = Column(Text, nullable=False, unique=True)
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
