"""
Category repository interface.
Defines the contract for category data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from taskflow.domain.models.category import Category


class CategoryRepository(ABC):
    """
    Repository interface for Category entity.
    """

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """
        Insert a new category.
        Raises DuplicateEntityError on a (user_id, name) collision in the store.
        """
        pass

    @abstractmethod
    async def find_by_id(self, category_id: str) -> Optional[Category]:
        """
        Find a category by its ID.
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> List[Category]:
        """
        Find all categories owned by a user.
        """
        pass

    @abstractmethod
    async def find_by_name_and_user_id(self, name: str, user_id: str) -> Optional[Category]:
        """
        Find a user's category by exact name.
        """
        pass

    @abstractmethod
    async def update(self, category: Category) -> Category:
        """
        Update an existing category.
        """
        pass

    @abstractmethod
    async def delete(self, category_id: str) -> bool:
        """
        Delete a category by ID.
        Tasks referencing it are left untouched.
        """
        pass
