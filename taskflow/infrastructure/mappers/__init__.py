"""
Infrastructure mappers module.
Contains mappers for converting between domain entities and database models.
"""

from .user_mapper import UserMapper
from .category_mapper import CategoryMapper
from .task_mapper import TaskMapper
from .collaboration_mapper import CollaborationMapper

__all__ = [
    "UserMapper",
    "CategoryMapper",
    "TaskMapper",
    "CollaborationMapper",
]
