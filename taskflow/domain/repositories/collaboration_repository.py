"""
Task collaboration repository interface.
Defines the contract for collaboration grant persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from taskflow.domain.models.collaboration import TaskCollaboration


class TaskCollaborationRepository(ABC):
    """
    Repository interface for TaskCollaboration entity.
    Rows are keyed by the (task_id, user_id) pair.
    """

    @abstractmethod
    async def save(self, collaboration: TaskCollaboration) -> TaskCollaboration:
        """
        Insert a new collaboration row.
        Raises DuplicateEntityError if the (task_id, user_id) pair already exists.
        """
        pass

    @abstractmethod
    async def find_by_task_id(self, task_id: str) -> List[TaskCollaboration]:
        """
        Find all collaboration rows of a task.
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> List[TaskCollaboration]:
        """
        Find all collaboration rows of a user.
        """
        pass

    @abstractmethod
    async def find_by_task_and_user(
        self,
        task_id: str,
        user_id: str
    ) -> Optional[TaskCollaboration]:
        """
        Find the single row for a (task_id, user_id) pair.
        """
        pass

    @abstractmethod
    async def delete(self, task_id: str, user_id: str) -> bool:
        """
        Delete the row for a (task_id, user_id) pair.
        Returns False if there was no such row.
        """
        pass

    @abstractmethod
    async def delete_all_by_task_id(self, task_id: str) -> int:
        """
        Delete every row of a task.
        Returns number of rows deleted.
        """
        pass
