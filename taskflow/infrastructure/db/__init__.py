"""
Database infrastructure for the Taskflow project.
"""

from .database import Base, create_engine, create_session_factory, create_tables, drop_tables
from .models import *

__all__ = [
    "Base",
    "create_engine",
    "create_session_factory",
    "create_tables",
    "drop_tables",
    "UserModel",
    "CategoryModel",
    "TaskModel",
    "TaskCollaborationModel",
    "TokenBlacklistModel",
]
