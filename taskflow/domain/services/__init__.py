"""
Domain services for the task management system.
This module exports the domain services and ports used by the application layer.
"""

from .auth_service import AuthService
from .permission_resolver import PermissionResolver

__all__ = [
    "AuthService",
    "PermissionResolver",
]
