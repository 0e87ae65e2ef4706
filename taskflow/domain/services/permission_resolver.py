"""
Permission resolver for task access control.

Computes a user's effective permission on a task. Grant paths are checked in
a fixed order and the first match wins:

1. Creator of the task -> OWNER
2. Assignee of the task -> COLLABORATOR
3. Explicit collaboration row -> the row's role, verbatim
4. Otherwise -> NONE

Grants are never merged: an assignee holding a VIEWER row is a COLLABORATOR,
and a creator holding a VIEWER row is still the OWNER.
"""

import logging

from taskflow.domain.models.base import ValidationError
from taskflow.domain.models.collaboration import PermissionLevel
from taskflow.domain.models.task import Task
from taskflow.domain.repositories.collaboration_repository import TaskCollaborationRepository

logger = logging.getLogger(__name__)


class PermissionResolver:
    """
    Domain service resolving task permissions.
    Has no side effects; it only reads collaboration rows.
    """

    def __init__(self, collaboration_repository: TaskCollaborationRepository):
        self.collaboration_repository = collaboration_repository

    @staticmethod
    def resolve_implicit(task: Task, user_id: str) -> PermissionLevel:
        """
        Resolve the grants carried by the task itself (creator, assignee).
        Returns NONE when neither applies; no storage is read.
        """
        if task.created_by_id == user_id:
            return PermissionLevel.OWNER
        if task.assigned_user_id == user_id:
            return PermissionLevel.COLLABORATOR
        return PermissionLevel.NONE

    async def resolve(self, task: Task, user_id: str) -> PermissionLevel:
        """
        Resolve the effective permission of ``user_id`` on ``task``.
        """
        if task is None:
            raise ValidationError("Task is required to resolve permissions", "task")

        level = self.resolve_implicit(task, user_id)
        if level is not PermissionLevel.NONE:
            return level

        collaboration = await self.collaboration_repository.find_by_task_and_user(
            task.id, user_id
        )
        if collaboration is None:
            logger.debug(f"User {user_id} has no grant on task {task.id}")
            return PermissionLevel.NONE

        return PermissionLevel.from_role(collaboration.role)
