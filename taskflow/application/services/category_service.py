"""
Category service.
Owner-scoped category management.
"""

import logging
from typing import List

from taskflow.application.dto.category_dto import (
    CreateCategoryRequestDTO,
    UpdateCategoryRequestDTO,
)
from taskflow.domain.models.base import (
    DuplicateEntityError,
    EntityNotFoundError,
    PermissionDeniedError,
)
from taskflow.domain.models.category import Category
from taskflow.domain.repositories.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class CategoryService:
    """Category service. Only the owner may change or delete a category."""

    def __init__(self, category_repository: CategoryRepository):
        self.category_repository = category_repository

    async def create_category(self, request: CreateCategoryRequestDTO, user_id: str) -> Category:
        existing = await self.category_repository.find_by_name_and_user_id(request.name, user_id)
        if existing is not None:
            raise DuplicateEntityError("Category", "name", request.name)

        category = await self.category_repository.save(Category(
            name=request.name,
            description=request.description,
            color=request.color,
            user_id=user_id,
        ))

        logger.info(f"User {user_id} created category {category.id}")
        return category

    async def get_category(self, category_id: str) -> Category:
        category = await self.category_repository.find_by_id(category_id)
        if category is None:
            raise EntityNotFoundError("Category", category_id)
        return category

    async def list_user_categories(self, user_id: str) -> List[Category]:
        return await self.category_repository.find_by_user_id(user_id)

    async def update_category(
        self,
        category_id: str,
        request: UpdateCategoryRequestDTO,
        user_id: str
    ) -> Category:
        category = await self._get_owned_category(category_id, user_id, "update")

        if request.name:
            existing = await self.category_repository.find_by_name_and_user_id(request.name, user_id)
            if existing is not None and existing.id != category.id:
                raise DuplicateEntityError("Category", "name", request.name)

        category.apply_changes(
            name=request.name,
            description=request.description,
            color=request.color,
        )
        return await self.category_repository.update(category)

    async def delete_category(self, category_id: str, user_id: str) -> None:
        """
        Delete a category.
        Tasks that reference it keep their category_id.
        """
        await self._get_owned_category(category_id, user_id, "delete")
        await self.category_repository.delete(category_id)
        logger.info(f"User {user_id} deleted category {category_id}")

    async def _get_owned_category(self, category_id: str, user_id: str, action: str) -> Category:
        category = await self.get_category(category_id)
        if not category.is_owned_by(user_id):
            logger.info(f"User {user_id} denied {action} of category {category_id}")
            raise PermissionDeniedError(f"Unauthorized to {action} this category")
        return category
