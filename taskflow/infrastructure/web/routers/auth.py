"""
Authentication router for user authentication endpoints.
Handles user registration, login and logout.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from taskflow.application.dto.base_dto import MessageResponseDTO
from taskflow.application.dto.user_dto import (
    AuthTokenResponseDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
    UserResponseDTO,
)
from taskflow.application.services.user_service import UserService
from taskflow.infrastructure.auth.dependencies import CurrentToken, CurrentUserId
from taskflow.infrastructure.container import ServiceContainer, get_container


router = APIRouter()


def get_user_service(
    container: Annotated[ServiceContainer, Depends(get_container)]
) -> UserService:
    """Dependency to get the user service."""
    return container.user_service


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=UserResponseDTO)
async def register(
    request: RegisterRequestDTO,
    user_service: Annotated[UserService, Depends(get_user_service)]
):
    """
    Register a new user account.

    - **name**: Display name
    - **email**: Valid email address, unique across users
    - **password**: Password with at least 6 characters
    """
    user = await user_service.register(request)
    return UserResponseDTO.from_domain(user)


@router.post("/login", response_model=AuthTokenResponseDTO)
async def login(
    request: LoginRequestDTO,
    user_service: Annotated[UserService, Depends(get_user_service)]
):
    """Exchange email and password for a bearer access token."""
    user, access_token = await user_service.authenticate(request.email, request.password)
    return AuthTokenResponseDTO(
        access_token=access_token,
        user=UserResponseDTO.from_domain(user)
    )


@router.post("/logout", response_model=MessageResponseDTO)
async def logout(
    user_id: CurrentUserId,
    token: CurrentToken,
    user_service: Annotated[UserService, Depends(get_user_service)]
):
    """Revoke the bearer token used for this request."""
    await user_service.logout(token)
    return MessageResponseDTO(message="Logged out successfully")
