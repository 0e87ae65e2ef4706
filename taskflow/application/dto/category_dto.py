"""
Category DTOs for the application layer.
"""

from typing import Optional

from pydantic import Field

from taskflow.domain.models.category import Category
from .base_dto import CreateRequestDTO, UpdateRequestDTO, ResponseDTO


class CreateCategoryRequestDTO(CreateRequestDTO):
    """DTO for category creation requests."""

    name: str = Field(min_length=1, max_length=100, description="Category name")
    description: Optional[str] = Field(default=None, max_length=500, description="Category description")
    color: Optional[str] = Field(default=None, max_length=7, description="Hex color, e.g. #ff8800")


class UpdateCategoryRequestDTO(UpdateRequestDTO):
    """DTO for category update requests."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100, description="Category name")
    description: Optional[str] = Field(default=None, max_length=500, description="Category description")
    color: Optional[str] = Field(default=None, max_length=7, description="Hex color")


class CategoryResponseDTO(ResponseDTO):
    """DTO for category responses."""

    name: str
    description: Optional[str] = None
    color: Optional[str] = None
    user_id: str

    @classmethod
    def from_domain(cls, category: Category) -> "CategoryResponseDTO":
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            color=category.color,
            user_id=category.user_id,
            created_at=category.created_at,
            updated_at=category.updated_at
        )
