"""
Collaboration service.
Grants, revokes and lists collaboration roles on tasks.
"""

import logging
from typing import List, Optional

from taskflow.application.dto.collaboration_dto import AddCollaboratorRequestDTO
from taskflow.domain.models.base import (
    DuplicateEntityError,
    EntityNotFoundError,
    PermissionDeniedError,
)
from taskflow.domain.models.collaboration import PermissionLevel, TaskCollaboration
from taskflow.domain.models.task import Task
from taskflow.domain.repositories.collaboration_repository import TaskCollaborationRepository
from taskflow.domain.repositories.task_repository import TaskRepository
from taskflow.domain.services.permission_resolver import PermissionResolver

logger = logging.getLogger(__name__)


class CollaborationService:
    """
    Collaboration service.

    Managing grants needs ownership: the creator of the task or a user with
    an OWNER row. Being the assignee is not enough here, even though the
    permission resolver makes the assignee a COLLABORATOR.
    """

    def __init__(
        self,
        collaboration_repository: TaskCollaborationRepository,
        task_repository: TaskRepository,
        permission_resolver: PermissionResolver
    ):
        self.collaboration_repository = collaboration_repository
        self.task_repository = task_repository
        self.permission_resolver = permission_resolver

    async def add_collaborator(
        self,
        request: AddCollaboratorRequestDTO,
        acting_user_id: str
    ) -> TaskCollaboration:
        """Grant ``request.role`` on a task to ``request.user_id``."""
        task = await self._get_existing_task(request.task_id)

        if not await self._is_owner(task, acting_user_id):
            logger.info(
                f"User {acting_user_id} is not an owner of task {task.id}, cannot add collaborators"
            )
            raise PermissionDeniedError("Only task owners can add collaborators")

        existing = await self.collaboration_repository.find_by_task_and_user(
            request.task_id, request.user_id
        )
        if existing is not None:
            raise DuplicateEntityError("TaskCollaboration", "user_id", request.user_id)

        # The store's unique key on (task_id, user_id) raises the same
        # DuplicateEntityError when a concurrent request wins the race.
        collaboration = await self.collaboration_repository.save(TaskCollaboration(
            task_id=request.task_id,
            user_id=request.user_id,
            role=request.role,
        ))

        logger.info(
            f"User {acting_user_id} granted {collaboration.role.value} on task "
            f"{task.id} to user {request.user_id}"
        )
        return collaboration

    async def list_task_collaborators(
        self,
        task_id: str,
        acting_user_id: str
    ) -> List[TaskCollaboration]:
        """
        List every row of a task.
        Visible to the creator, the assignee and anyone holding a row.
        """
        task = await self._get_existing_task(task_id)

        if not task.involves(acting_user_id):
            collaboration = await self.collaboration_repository.find_by_task_and_user(
                task_id, acting_user_id
            )
            if collaboration is None:
                raise PermissionDeniedError("Unauthorized to view task collaborators")

        return await self.collaboration_repository.find_by_task_id(task_id)

    async def list_user_collaborations(self, user_id: str) -> List[TaskCollaboration]:
        """All rows held by a user."""
        return await self.collaboration_repository.find_by_user_id(user_id)

    async def remove_collaborator(
        self,
        task_id: str,
        target_user_id: str,
        acting_user_id: str
    ) -> None:
        """
        Revoke the row of ``target_user_id``.
        Removing a row that does not exist succeeds silently.
        """
        task = await self._get_existing_task(task_id)

        if not await self._is_owner(task, acting_user_id):
            logger.info(
                f"User {acting_user_id} is not an owner of task {task_id}, cannot remove collaborators"
            )
            raise PermissionDeniedError("Only task owners can remove collaborators")

        removed = await self.collaboration_repository.delete(task_id, target_user_id)
        if removed:
            logger.info(
                f"User {acting_user_id} removed user {target_user_id} from task {task_id}"
            )
        else:
            logger.debug(f"No collaboration of user {target_user_id} on task {task_id} to remove")

    async def check_permission(self, task_id: str, user_id: str) -> Optional[PermissionLevel]:
        """
        Effective permission of a user on a task.
        Returns None both when the task is missing and when the user has none.
        """
        task = await self.task_repository.find_by_id(task_id)
        if task is None:
            return None

        level = await self.permission_resolver.resolve(task, user_id)
        if level is PermissionLevel.NONE:
            return None
        return level

    async def _get_existing_task(self, task_id: str) -> Task:
        task = await self.task_repository.find_by_id(task_id)
        if task is None:
            raise EntityNotFoundError("Task", task_id)
        return task

    async def _is_owner(self, task: Task, user_id: str) -> bool:
        if task.created_by_id == user_id:
            return True
        collaboration = await self.collaboration_repository.find_by_task_and_user(task.id, user_id)
        return collaboration is not None and collaboration.is_owner
