"""
Collaboration mapper for converting between domain entities and database models.
"""

from taskflow.domain.models.base import ensure_utc
from taskflow.domain.models.collaboration import TaskCollaboration, CollaborationRole
from taskflow.infrastructure.db.models import TaskCollaborationModel


class CollaborationMapper:
    """Maps between TaskCollaboration and TaskCollaborationModel."""

    def domain_to_model(self, collaboration: TaskCollaboration) -> TaskCollaborationModel:
        return TaskCollaborationModel(
            id=collaboration.id,
            task_id=collaboration.task_id,
            user_id=collaboration.user_id,
            role=collaboration.role,
            created_at=collaboration.created_at,
            updated_at=collaboration.updated_at
        )

    def model_to_domain(self, model: TaskCollaborationModel) -> TaskCollaboration:
        return TaskCollaboration(
            id=model.id,
            task_id=model.task_id,
            user_id=model.user_id,
            role=CollaborationRole(model.role),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at)
        )
