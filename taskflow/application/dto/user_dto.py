"""
User DTOs for the application layer.
Data Transfer Objects for registration, login and profile operations.
"""

from typing import Optional

from pydantic import Field, EmailStr

from taskflow.domain.models.user import User
from .base_dto import BaseDTO, RequestDTO, CreateRequestDTO, UpdateRequestDTO, ResponseDTO


class RegisterRequestDTO(CreateRequestDTO):
    """DTO for user registration requests."""

    name: str = Field(min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(description="User email address")
    password: str = Field(min_length=6, max_length=128, description="Plain text password")


class LoginRequestDTO(RequestDTO):
    """DTO for login requests."""

    email: EmailStr = Field(description="User email")
    password: str = Field(min_length=1, description="User password")


class UpdateUserRequestDTO(UpdateRequestDTO):
    """DTO for profile update requests."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = Field(default=None)
    password: Optional[str] = Field(default=None, min_length=6, max_length=128)


class UserResponseDTO(ResponseDTO):
    """DTO for user responses. Never carries the password hash."""

    name: str
    email: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponseDTO":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at
        )


class AuthTokenResponseDTO(BaseDTO):
    """DTO returned after a successful login."""

    access_token: str
    token_type: str = "bearer"
    user: UserResponseDTO
