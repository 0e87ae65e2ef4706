"""
Category mapper for converting between domain entities and database models.
"""

from taskflow.domain.models.base import ensure_utc
from taskflow.domain.models.category import Category
from taskflow.infrastructure.db.models import CategoryModel


class CategoryMapper:
    """Maps between Category domain entity and CategoryModel database model."""

    def domain_to_model(self, category: Category) -> CategoryModel:
        """Convert Category domain entity to CategoryModel."""
        return CategoryModel(
            id=category.id,
            user_id=category.user_id,
            name=category.name,
            description=category.description,
            color=category.color,
            created_at=category.created_at,
            updated_at=category.updated_at
        )

    def update_model(self, model: CategoryModel, category: Category) -> None:
        model.name = category.name
        model.description = category.description
        model.color = category.color
        model.updated_at = category.updated_at

    def model_to_domain(self, model: CategoryModel) -> Category:
        """Convert CategoryModel to Category domain entity."""
        return Category(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            description=model.description,
            color=model.color,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at)
        )
