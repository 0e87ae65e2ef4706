"""
Task DTOs for the application layer.
Data Transfer Objects for task-related operations.
"""

from typing import Optional
from datetime import datetime

from pydantic import ConfigDict, Field

from taskflow.domain.models.task import Task, TaskPriority, TaskStatus
from .base_dto import CreateRequestDTO, UpdateRequestDTO, ResponseDTO


class CreateTaskRequestDTO(CreateRequestDTO):
    """
    DTO for task creation requests.
    A ``status`` sent by the caller is dropped: new tasks always start as TODO.
    """

    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1, max_length=255, description="Task title")
    description: Optional[str] = Field(default=None, max_length=5000, description="Task description")
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM, description="Task priority")
    due_date: Optional[datetime] = Field(default=None, description="Task due date")
    category_id: Optional[str] = Field(default=None, description="Category ID")
    assigned_user_id: str = Field(min_length=1, description="Assigned user ID")


class UpdateTaskRequestDTO(UpdateRequestDTO):
    """DTO for task update requests. Omitted fields are left unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=255, description="Task title")
    description: Optional[str] = Field(default=None, max_length=5000, description="Task description")
    status: Optional[TaskStatus] = Field(default=None, description="Task status")
    priority: Optional[TaskPriority] = Field(default=None, description="Task priority")
    due_date: Optional[datetime] = Field(default=None, description="Task due date")
    category_id: Optional[str] = Field(default=None, description="Category ID")
    assigned_user_id: Optional[str] = Field(default=None, min_length=1, description="Assigned user ID")


class TaskResponseDTO(ResponseDTO):
    """DTO for task responses."""

    title: str = Field(description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    status: TaskStatus = Field(description="Task status")
    priority: TaskPriority = Field(description="Task priority")
    due_date: Optional[datetime] = Field(default=None, description="Task due date")
    category_id: Optional[str] = Field(default=None, description="Category ID")
    assigned_user_id: str = Field(description="Assigned user ID")
    created_by_id: str = Field(description="Creator user ID")

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponseDTO":
        return cls(
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
