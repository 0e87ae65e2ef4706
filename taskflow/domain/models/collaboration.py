"""
Task collaboration domain model.
An explicit (task, user, role) grant, unique per (task, user) pair.
"""

from dataclasses import dataclass
from enum import Enum

from taskflow.domain.models.base import BaseEntity, ValidationError


class CollaborationRole(str, Enum):
    """Role recorded on a collaboration row."""
    OWNER = "OWNER"
    COLLABORATOR = "COLLABORATOR"
    VIEWER = "VIEWER"


class PermissionLevel(str, Enum):
    """
    Effective permission of a user on a task.
    Ordered by capability: OWNER > COLLABORATOR > VIEWER > NONE.
    """
    OWNER = "OWNER"
    COLLABORATOR = "COLLABORATOR"
    VIEWER = "VIEWER"
    NONE = "NONE"

    @property
    def rank(self) -> int:
        return _PERMISSION_RANKS[self]

    @property
    def can_read(self) -> bool:
        return self is not PermissionLevel.NONE

    @property
    def can_edit(self) -> bool:
        return self in (PermissionLevel.OWNER, PermissionLevel.COLLABORATOR)

    @property
    def can_delete(self) -> bool:
        return self is PermissionLevel.OWNER

    @classmethod
    def from_role(cls, role: CollaborationRole) -> "PermissionLevel":
        return cls(CollaborationRole(role).value)

    def to_role(self):
        """Return the matching collaboration role, or None for NONE."""
        if self is PermissionLevel.NONE:
            return None
        return CollaborationRole(self.value)


_PERMISSION_RANKS = {
    PermissionLevel.NONE: 0,
    PermissionLevel.VIEWER: 1,
    PermissionLevel.COLLABORATOR: 2,
    PermissionLevel.OWNER: 3,
}


@dataclass(kw_only=True, eq=False)
class TaskCollaboration(BaseEntity):
    """Collaboration grant on a task."""

    task_id: str
    user_id: str
    role: CollaborationRole = CollaborationRole.VIEWER

    def __post_init__(self):
        """Initialize collaboration after creation."""
        super().__post_init__()
        self.role = CollaborationRole(self.role)
        self.validate()

    def validate(self) -> None:
        """Validate collaboration state."""
        if not self.task_id:
            raise ValidationError("Task ID is required", "task_id")
        if not self.user_id:
            raise ValidationError("User ID is required", "user_id")

    @property
    def is_owner(self) -> bool:
        return self.role == CollaborationRole.OWNER
