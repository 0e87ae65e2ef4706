"""
User repository interface.
Defines the contract for user data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from taskflow.domain.models.user import User


class UserRepository(ABC):
    """
    Repository interface for User entity.
    Defines all operations needed for user data persistence.
    """

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Insert a new user.
        Returns the saved user with its generated ID.
        Raises DuplicateEntityError if the email is already taken.
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find a user by their ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find a user by their email address.
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """
        Find all users.
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Update an existing user.
        Raises EntityNotFoundError if the user does not exist.
        """
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """
        Delete a user by ID.
        Returns True if successful, False if user not found.
        """
        pass
