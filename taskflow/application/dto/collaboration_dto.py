"""
Collaboration DTOs for the application layer.
"""

from typing import Optional

from pydantic import Field

from taskflow.domain.models.collaboration import (
    CollaborationRole, PermissionLevel, TaskCollaboration
)
from .base_dto import BaseDTO, CreateRequestDTO, ResponseDTO


class AddCollaboratorRequestDTO(CreateRequestDTO):
    """DTO for granting a role on a task. The role is stored as given."""

    task_id: str = Field(min_length=1, description="Task ID")
    user_id: str = Field(min_length=1, description="User receiving the grant")
    role: CollaborationRole = Field(default=CollaborationRole.VIEWER, description="Granted role")


class CollaborationResponseDTO(ResponseDTO):
    """DTO for collaboration responses."""

    task_id: str
    user_id: str
    role: CollaborationRole

    @classmethod
    def from_domain(cls, collaboration: TaskCollaboration) -> "CollaborationResponseDTO":
        return cls(
            id=collaboration.id,
            task_id=collaboration.task_id,
            user_id=collaboration.user_id,
            role=collaboration.role,
            created_at=collaboration.created_at,
            updated_at=collaboration.updated_at
        )


class PermissionResponseDTO(BaseDTO):
    """Effective role of a user on a task; None when absent or no permission."""

    task_id: str
    user_id: str
    role: Optional[PermissionLevel] = None
