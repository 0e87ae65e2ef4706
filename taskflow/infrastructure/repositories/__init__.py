"""
Infrastructure repositories module.
Contains SQLAlchemy implementations of domain repositories.
"""

from .user_repository import SQLAlchemyUserRepository
from .category_repository import SQLAlchemyCategoryRepository
from .task_repository import SQLAlchemyTaskRepository
from .collaboration_repository import SQLAlchemyTaskCollaborationRepository
from .token_blacklist_repository import SQLAlchemyTokenBlacklistRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyCategoryRepository",
    "SQLAlchemyTaskRepository",
    "SQLAlchemyTaskCollaborationRepository",
    "SQLAlchemyTokenBlacklistRepository",
]
