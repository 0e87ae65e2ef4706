"""
Task repository interface.
Defines the contract for task data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from taskflow.domain.models.task import Task, TaskStatus


class TaskRepository(ABC):
    """
    Repository interface for Task entity.
    Listings are returned newest first (by creation time).
    """

    @abstractmethod
    async def save(self, task: Task) -> Task:
        """
        Insert a new task.
        Returns the saved task with its generated ID.
        """
        pass

    @abstractmethod
    async def find_by_id(self, task_id: str) -> Optional[Task]:
        """
        Find a task by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> List[Task]:
        """
        Find all tasks the user created OR is assigned to.
        Collaboration rows are not consulted.
        """
        pass

    @abstractmethod
    async def find_by_category_id(self, category_id: str) -> List[Task]:
        """
        Find all tasks in a category, regardless of who can see them.
        """
        pass

    @abstractmethod
    async def find_by_status(self, status: TaskStatus) -> List[Task]:
        """
        Find all tasks with a specific status, regardless of who can see them.
        """
        pass

    @abstractmethod
    async def find_by_assigned_user(self, user_id: str) -> List[Task]:
        """
        Find all tasks assigned to a specific user.
        """
        pass

    @abstractmethod
    async def find_by_created_user(self, user_id: str) -> List[Task]:
        """
        Find all tasks created by a specific user.
        """
        pass

    @abstractmethod
    async def find_by_title_and_category(
        self,
        title: str,
        category_id: Optional[str]
    ) -> Optional[Task]:
        """
        Find a task by exact title within a category scope.
        A category_id of None matches tasks without a category.
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Task]:
        """
        Find all tasks.
        """
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """
        Update an existing task.
        Raises EntityNotFoundError if the task does not exist.
        """
        pass

    @abstractmethod
    async def delete(self, task_id: str) -> bool:
        """
        Delete a task by ID.
        Returns True if deleted, False if not found.
        """
        pass
