"""
Task access service.
Implements permission-gated task operations on top of the repositories.
"""

import logging
from typing import List, Optional

from taskflow.application.dto.task_dto import CreateTaskRequestDTO, UpdateTaskRequestDTO
from taskflow.domain.models.base import (
    DuplicateEntityError,
    EntityNotFoundError,
    PermissionDeniedError,
)
from taskflow.domain.models.collaboration import (
    CollaborationRole,
    PermissionLevel,
    TaskCollaboration,
)
from taskflow.domain.models.task import Task, TaskStatus
from taskflow.domain.repositories.collaboration_repository import TaskCollaborationRepository
from taskflow.domain.repositories.task_repository import TaskRepository
from taskflow.domain.services.permission_resolver import PermissionResolver

logger = logging.getLogger(__name__)


class TaskService:
    """
    Task access service.

    Every read, write and delete on a single task is decided by the
    permission resolver. Collection reads come in two shapes: the user's own
    tasks (creator or assignee only) and category/status listings, which also
    include tasks the user reaches through a collaboration row.
    """

    def __init__(
        self,
        task_repository: TaskRepository,
        collaboration_repository: TaskCollaborationRepository,
        permission_resolver: PermissionResolver
    ):
        self.task_repository = task_repository
        self.collaboration_repository = collaboration_repository
        self.permission_resolver = permission_resolver

    async def create_task(self, request: CreateTaskRequestDTO, created_by_id: str) -> Task:
        """
        Create a task owned by ``created_by_id``.

        The task and the creator's OWNER collaboration row are two separate
        writes. If the second one fails the task remains without its row.
        """
        await self._ensure_unique_title(request.title, request.category_id)

        task = Task(
            title=request.title,
            description=request.description,
            priority=request.priority,
            due_date=request.due_date,
            category_id=request.category_id,
            assigned_user_id=request.assigned_user_id,
            created_by_id=created_by_id,
            status=TaskStatus.TODO,
        )
        saved_task = await self.task_repository.save(task)

        try:
            await self.collaboration_repository.save(TaskCollaboration(
                task_id=saved_task.id,
                user_id=created_by_id,
                role=CollaborationRole.OWNER,
            ))
        except Exception:
            logger.error(
                f"Task {saved_task.id} was created but its OWNER collaboration "
                f"for user {created_by_id} could not be written",
                exc_info=True
            )
            raise

        logger.info(f"User {created_by_id} created task {saved_task.id}")
        return saved_task

    async def get_task(self, task_id: str, user_id: str) -> Task:
        """Get a task the user can read (any permission other than NONE)."""
        task = await self._get_existing_task(task_id)

        level = await self.permission_resolver.resolve(task, user_id)
        if not level.can_read:
            logger.info(f"User {user_id} denied read access to task {task_id}")
            raise PermissionDeniedError("Unauthorized to view this task")

        return task

    async def list_user_tasks(self, user_id: str) -> List[Task]:
        """Tasks the user created or is assigned to."""
        return await self.task_repository.find_by_user_id(user_id)

    async def list_tasks_by_category(self, category_id: str, user_id: str) -> List[Task]:
        """Tasks in a category that the user can see."""
        tasks = await self.task_repository.find_by_category_id(category_id)
        return await self._filter_visible(tasks, user_id)

    async def list_tasks_by_status(self, status: TaskStatus, user_id: str) -> List[Task]:
        """Tasks with a status that the user can see."""
        tasks = await self.task_repository.find_by_status(TaskStatus(status))
        return await self._filter_visible(tasks, user_id)

    async def list_assigned_tasks(self, user_id: str) -> List[Task]:
        """Tasks assigned to the user."""
        return await self.task_repository.find_by_assigned_user(user_id)

    async def update_task(
        self,
        task_id: str,
        request: UpdateTaskRequestDTO,
        user_id: str
    ) -> Task:
        """
        Update a task as OWNER or COLLABORATOR.

        A new title is checked against the task's current category, not a
        category_id sent in the same request.
        """
        task = await self._get_existing_task(task_id)

        level = await self.permission_resolver.resolve(task, user_id)
        if not level.can_edit:
            logger.info(
                f"User {user_id} with permission {level.value} denied update of task {task_id}"
            )
            raise PermissionDeniedError("Unauthorized to update this task")

        changes = request.to_changes()
        if changes.get("title") is not None:
            await self._ensure_unique_title(
                changes["title"], task.category_id, exclude_task_id=task.id
            )

        task.apply_changes(changes)
        updated_task = await self.task_repository.update(task)

        logger.info(f"User {user_id} updated task {task_id}: {sorted(changes)}")
        return updated_task

    async def delete_task(self, task_id: str, user_id: str) -> None:
        """
        Delete a task as its OWNER.
        Collaboration rows are removed before the task itself.
        """
        task = await self._get_existing_task(task_id)

        level = await self.permission_resolver.resolve(task, user_id)
        if not level.can_delete:
            logger.info(
                f"User {user_id} with permission {level.value} denied deletion of task {task_id}"
            )
            raise PermissionDeniedError("Unauthorized to delete this task")

        removed = await self.collaboration_repository.delete_all_by_task_id(task_id)
        await self.task_repository.delete(task_id)

        logger.info(
            f"User {user_id} deleted task {task_id} and {removed} collaboration rows"
        )

    async def _get_existing_task(self, task_id: str) -> Task:
        task = await self.task_repository.find_by_id(task_id)
        if task is None:
            raise EntityNotFoundError("Task", task_id)
        return task

    async def _ensure_unique_title(
        self,
        title: str,
        category_id: Optional[str],
        exclude_task_id: Optional[str] = None
    ) -> None:
        existing = await self.task_repository.find_by_title_and_category(title, category_id)
        if existing is not None and existing.id != exclude_task_id:
            raise DuplicateEntityError("Task", "title", title)

    async def _filter_visible(self, tasks: List[Task], user_id: str) -> List[Task]:
        """
        Keep the tasks the user resolves to anything but NONE.
        Creator and assignee are checked first; the collaboration table is
        only queried for tasks where neither matches.
        """
        visible = []
        for task in tasks:
            if PermissionResolver.resolve_implicit(task, user_id) is not PermissionLevel.NONE:
                visible.append(task)
                continue

            collaboration = await self.collaboration_repository.find_by_task_and_user(
                task.id, user_id
            )
            if collaboration is not None:
                visible.append(task)

        return visible
