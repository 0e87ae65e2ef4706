"""
Category router.
Categories are private to the authenticated user.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, status

from taskflow.application.dto.category_dto import (
    CategoryResponseDTO,
    CreateCategoryRequestDTO,
    UpdateCategoryRequestDTO,
)
from taskflow.application.services.category_service import CategoryService
from taskflow.infrastructure.auth.dependencies import CurrentUserId
from taskflow.infrastructure.container import ServiceContainer, get_container


router = APIRouter()


def get_category_service(
    container: Annotated[ServiceContainer, Depends(get_container)]
) -> CategoryService:
    """Dependency to get the category service."""
    return container.category_service


CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CategoryResponseDTO)
async def create_category(
    request: CreateCategoryRequestDTO,
    user_id: CurrentUserId,
    category_service: CategoryServiceDep
):
    """
    Create a category.

    - **name**: Unique among the user's categories (required)
    - **description**: Category description
    - **color**: Hex color such as #ff8800
    """
    category = await category_service.create_category(request, user_id)
    return CategoryResponseDTO.from_domain(category)


@router.get("", response_model=List[CategoryResponseDTO])
async def list_categories(user_id: CurrentUserId, category_service: CategoryServiceDep):
    categories = await category_service.list_user_categories(user_id)
    return [CategoryResponseDTO.from_domain(category) for category in categories]


@router.get("/{category_id}", response_model=CategoryResponseDTO)
async def get_category(
    category_id: str,
    user_id: CurrentUserId,
    category_service: CategoryServiceDep
):
    category = await category_service.get_category(category_id)
    return CategoryResponseDTO.from_domain(category)


@router.put("/{category_id}", response_model=CategoryResponseDTO)
async def update_category(
    category_id: str,
    request: UpdateCategoryRequestDTO,
    user_id: CurrentUserId,
    category_service: CategoryServiceDep
):
    """Update a category owned by the authenticated user."""
    category = await category_service.update_category(category_id, request, user_id)
    return CategoryResponseDTO.from_domain(category)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: str,
    user_id: CurrentUserId,
    category_service: CategoryServiceDep
):
    """Delete a category owned by the authenticated user. Its tasks are kept."""
    await category_service.delete_category(category_id, user_id)
