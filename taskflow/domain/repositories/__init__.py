"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .user_repository import UserRepository
from .category_repository import CategoryRepository
from .task_repository import TaskRepository
from .collaboration_repository import TaskCollaborationRepository
from .token_blacklist_repository import TokenBlacklistRepository

__all__ = [
    "UserRepository",
    "CategoryRepository",
    "TaskRepository",
    "TaskCollaborationRepository",
    "TokenBlacklistRepository",
]
