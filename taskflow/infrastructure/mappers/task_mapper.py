"""
Task mapper for converting between domain entities and database models.
"""

from taskflow.domain.models.base import ensure_utc
from taskflow.domain.models.task import Task, TaskStatus, TaskPriority
from taskflow.infrastructure.db.models import TaskModel


class TaskMapper:
    """Maps between Task domain entity and TaskModel database model."""

    def domain_to_model(self, task: Task) -> TaskModel:
        """Convert Task domain entity to TaskModel."""
        return TaskModel(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            priority=task.priority,
            due_date=task.due_date,
            category_id=task.category_id,
            assigned_user_id=task.assigned_user_id,
            created_by_id=task.created_by_id,
            created_at=task.created_at,
            updated_at=task.updated_at
        )

    def update_model(self, model: TaskModel, task: Task) -> None:
        """Copy mutable fields of the entity onto an existing row."""
        model.title = task.title
        model.description = task.description
        model.status = task.status
        model.priority = task.priority
        model.due_date = task.due_date
        model.category_id = task.category_id
        model.assigned_user_id = task.assigned_user_id
        model.updated_at = task.updated_at

    def model_to_domain(self, model: TaskModel) -> Task:
        """Convert TaskModel to Task domain entity."""
        return Task(
            id=model.id,
            title=model.title,
            description=model.description,
            status=TaskStatus(model.status) if model.status else TaskStatus.TODO,
            priority=TaskPriority(model.priority) if model.priority else TaskPriority.MEDIUM,
            due_date=ensure_utc(model.due_date),
            category_id=model.category_id,
            assigned_user_id=model.assigned_user_id,
            created_by_id=model.created_by_id,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at)
        )
