"""
Category repository implementation using SQLAlchemy.
"""

from typing import Optional, List

from sqlalchemy import select, delete

from taskflow.domain.models.base import EntityNotFoundError
from taskflow.domain.models.category import Category
from taskflow.domain.repositories.category_repository import CategoryRepository
from taskflow.infrastructure.db.models import CategoryModel
from taskflow.infrastructure.mappers.category_mapper import CategoryMapper
from .base import SQLAlchemyRepository


class SQLAlchemyCategoryRepository(SQLAlchemyRepository, CategoryRepository):
    """SQLAlchemy implementation of category repository."""

    def __init__(self, session_factory):
        super().__init__(session_factory)
        self.mapper = CategoryMapper()

    async def save(self, category: Category) -> Category:
        model = self.mapper.domain_to_model(category)
        self.assign_id(model)

        async with self.session_factory() as session:
            session.add(model)
            await self.commit_unique(session, "Category", "name", category.name)

        return self.mapper.model_to_domain(model)

    async def find_by_id(self, category_id: str) -> Optional[Category]:
        async with self.session_factory() as session:
            model = await session.get(CategoryModel, category_id)
            return self.mapper.model_to_domain(model) if model else None

    async def find_by_user_id(self, user_id: str) -> List[Category]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(CategoryModel)
                .where(CategoryModel.user_id == user_id)
                .order_by(CategoryModel.name)
            )
            return [self.mapper.model_to_domain(model) for model in result.scalars()]

    async def find_by_name_and_user_id(self, name: str, user_id: str) -> Optional[Category]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(CategoryModel).where(
                    CategoryModel.user_id == user_id,
                    CategoryModel.name == name
                )
            )
            model = result.scalar_one_or_none()
            return self.mapper.model_to_domain(model) if model else None

    async def update(self, category: Category) -> Category:
        async with self.session_factory() as session:
            model = await session.get(CategoryModel, category.id)
            if not model:
                raise EntityNotFoundError("Category", category.id)

            self.mapper.update_model(model, category)
            await self.commit_unique(session, "Category", "name", category.name)

            return self.mapper.model_to_domain(model)

    async def delete(self, category_id: str) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(CategoryModel).where(CategoryModel.id == category_id)
            )
            await session.commit()
            return result.rowcount > 0
