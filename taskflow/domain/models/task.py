"""
Task domain model.
Represents a unit of work with an assignee, a creator and an optional category.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Dict, Any
from enum import Enum

from taskflow.domain.models.base import BaseEntity, ValidationError, ensure_utc


class TaskStatus(str, Enum):
    """Task workflow status."""
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class TaskPriority(str, Enum):
    """Task priority levels."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


# Fields a caller may change through an update; anything else is ignored.
UPDATABLE_FIELDS = (
    "title",
    "description",
    "status",
    "priority",
    "due_date",
    "category_id",
    "assigned_user_id",
)

# Fields that cannot be cleared; a None for them is ignored.
REQUIRED_FIELDS = frozenset({"title", "status", "priority", "assigned_user_id"})


@dataclass(kw_only=True, eq=False)
class Task(BaseEntity):
    """
    Task entity.

    Ownership is expressed twice: ``created_by_id`` always denotes the owner,
    and an OWNER collaboration row is written for the creator when the task is
    created. The category scope for title uniqueness is ``category_id``, where
    ``None`` is a scope of its own.
    """

    # Required fields
    title: str
    assigned_user_id: str
    created_by_id: str

    # Task details
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[datetime] = None
    category_id: Optional[str] = None

    def __post_init__(self):
        """Initialize task after creation."""
        super().__post_init__()
        self.status = TaskStatus(self.status)
        self.priority = TaskPriority(self.priority)
        self.due_date = ensure_utc(self.due_date)
        self.validate()

    def validate(self) -> None:
        """Validate task state."""
        if not self.title or not self.title.strip():
            raise ValidationError("Task title is required", "title")

        if len(self.title) > 255:
            raise ValidationError("Task title too long (max 255 characters)", "title")

        if not self.created_by_id:
            raise ValidationError("Created by is required", "created_by_id")

        if not self.assigned_user_id:
            raise ValidationError("Assigned user is required", "assigned_user_id")

        if self.description and len(self.description) > 5000:
            raise ValidationError("Description too long (max 5000 characters)", "description")

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    def is_overdue(self, now: datetime) -> bool:
        """A task is overdue when it has a due date strictly before ``now`` and is not completed."""
        if self.due_date is None or self.is_completed:
            return False
        return self.due_date < now

    def involves(self, user_id: str) -> bool:
        """Check if the user is the creator or the assignee."""
        return self.created_by_id == user_id or self.assigned_user_id == user_id

    def apply_changes(self, changes: Dict[str, Any]) -> None:
        """
        Apply a partial update.
        Only keys present in ``changes`` are touched; unknown keys are ignored.
        """
        for key in UPDATABLE_FIELDS:
            if key not in changes:
                continue
            value = changes[key]
            if value is None and key in REQUIRED_FIELDS:
                continue
            if key == "status" and value is not None:
                value = TaskStatus(value)
            elif key == "priority" and value is not None:
                value = TaskPriority(value)
            elif key == "due_date":
                value = ensure_utc(value)
            setattr(self, key, value)

        self.validate()
        self.mark_as_updated()
