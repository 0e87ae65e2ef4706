"""
User router.
Profile endpoints for the authenticated user and the user directory.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, status

from taskflow.application.dto.user_dto import UpdateUserRequestDTO, UserResponseDTO
from taskflow.application.services.user_service import UserService
from taskflow.infrastructure.auth.dependencies import CurrentUserId
from taskflow.infrastructure.web.routers.auth import get_user_service


router = APIRouter()


@router.get("/me", response_model=UserResponseDTO)
async def get_me(
    user_id: CurrentUserId,
    user_service: Annotated[UserService, Depends(get_user_service)]
):
    """Get the authenticated user's profile."""
    user = await user_service.get_user(user_id)
    return UserResponseDTO.from_domain(user)


@router.put("/me", response_model=UserResponseDTO)
async def update_me(
    request: UpdateUserRequestDTO,
    user_id: CurrentUserId,
    user_service: Annotated[UserService, Depends(get_user_service)]
):
    """
    Update the authenticated user's profile.

    - **name**: New display name
    - **email**: New email, must not belong to another user
    - **password**: New password
    """
    user = await user_service.update_user(user_id, request)
    return UserResponseDTO.from_domain(user)


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
async def delete_me(
    user_id: CurrentUserId,
    user_service: Annotated[UserService, Depends(get_user_service)]
):
    """Delete the authenticated user's account."""
    await user_service.delete_user(user_id)


@router.get("", response_model=List[UserResponseDTO])
async def list_users(
    user_id: CurrentUserId,
    user_service: Annotated[UserService, Depends(get_user_service)]
):
    """List all users, e.g. to pick an assignee or collaborator."""
    users = await user_service.list_users()
    return [UserResponseDTO.from_domain(user) for user in users]
