"""
User repository implementation using SQLAlchemy.
"""

from typing import Optional, List

from sqlalchemy import select, delete

from taskflow.domain.models.base import EntityNotFoundError
from taskflow.domain.models.user import User
from taskflow.domain.repositories.user_repository import UserRepository
from taskflow.infrastructure.db.models import UserModel
from taskflow.infrastructure.mappers.user_mapper import UserMapper
from .base import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository, UserRepository):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, session_factory):
        super().__init__(session_factory)
        self.mapper = UserMapper()

    async def save(self, user: User) -> User:
        """Save a new user entity."""
        model = self.mapper.domain_to_model(user)
        self.assign_id(model)

        async with self.session_factory() as session:
            session.add(model)
            await self.commit_unique(session, "User", "email", user.email)

        return self.mapper.model_to_domain(model)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        async with self.session_factory() as session:
            model = await session.get(UserModel, user_id)
            return self.mapper.model_to_domain(model) if model else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.email == str(email).strip().lower())
            )
            model = result.scalar_one_or_none()
            return self.mapper.model_to_domain(model) if model else None

    async def find_all(self) -> List[User]:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).order_by(UserModel.created_at))
            return [self.mapper.model_to_domain(model) for model in result.scalars()]

    async def update(self, user: User) -> User:
        """Update an existing user entity."""
        async with self.session_factory() as session:
            model = await session.get(UserModel, user.id)
            if not model:
                raise EntityNotFoundError("User", user.id)

            self.mapper.update_model(model, user)
            await self.commit_unique(session, "User", "email", user.email)

            return self.mapper.model_to_domain(model)

    async def delete(self, user_id: str) -> bool:
        """Delete user by ID."""
        async with self.session_factory() as session:
            result = await session.execute(delete(UserModel).where(UserModel.id == user_id))
            await session.commit()
            return result.rowcount > 0
