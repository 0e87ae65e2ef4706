"""
Domain models for the task management system.
This module exports all domain entities and the exception taxonomy.
"""

# Base classes
from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    EntityNotFoundError,
    DuplicateEntityError,
    PermissionDeniedError,
    AuthenticationError,
    utc_now,
    ensure_utc,
)

# Domain entities
from .user import User
from .category import Category
from .task import Task, TaskStatus, TaskPriority
from .collaboration import TaskCollaboration, CollaborationRole, PermissionLevel

__all__ = [
    # Base classes
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "PermissionDeniedError",
    "AuthenticationError",
    "utc_now",
    "ensure_utc",

    # Entities
    "User",
    "Category",
    "Task",
    "TaskStatus",
    "TaskPriority",
    "TaskCollaboration",
    "CollaborationRole",
    "PermissionLevel",
]
