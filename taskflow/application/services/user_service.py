"""
User service.
Registration, authentication, profile management and token revocation.
"""

import logging
from datetime import timedelta
from typing import List, Tuple

from taskflow.application.dto.user_dto import (
    RegisterRequestDTO,
    UpdateUserRequestDTO,
)
from taskflow.domain.models.base import (
    AuthenticationError,
    DuplicateEntityError,
    EntityNotFoundError,
    utc_now,
)
from taskflow.domain.models.user import User
from taskflow.domain.repositories.token_blacklist_repository import TokenBlacklistRepository
from taskflow.domain.repositories.user_repository import UserRepository
from taskflow.domain.services.auth_service import AuthService

logger = logging.getLogger(__name__)

# Used when a revoked token carries no readable expiry.
FALLBACK_REVOCATION_TTL = timedelta(days=1)


class UserService:
    """User service."""

    def __init__(
        self,
        user_repository: UserRepository,
        token_blacklist_repository: TokenBlacklistRepository,
        auth_service: AuthService
    ):
        self.user_repository = user_repository
        self.token_blacklist_repository = token_blacklist_repository
        self.auth_service = auth_service

    async def register(self, request: RegisterRequestDTO) -> User:
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise DuplicateEntityError("User", "email", request.email)

        user = await self.user_repository.save(User(
            name=request.name,
            email=str(request.email),
            password_hash=self.auth_service.hash_password(request.password),
        ))

        logger.info(f"Registered user {user.id}")
        return user

    async def authenticate(self, email: str, password: str) -> Tuple[User, str]:
        """
        Check credentials and issue an access token.
        Unknown email and wrong password fail the same way.
        """
        user = await self.user_repository.find_by_email(email)
        if user is None or not self.auth_service.verify_password(password, user.password_hash):
            logger.info("Rejected login attempt with invalid credentials")
            raise AuthenticationError("Invalid credentials")

        token = self.auth_service.generate_access_token(user.id, user.email)
        logger.info(f"User {user.id} logged in")
        return user, token

    async def get_user(self, user_id: str) -> User:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def list_users(self) -> List[User]:
        return await self.user_repository.find_all()

    async def update_user(self, user_id: str, request: UpdateUserRequestDTO) -> User:
        user = await self.get_user(user_id)

        email = str(request.email) if request.email is not None else None
        if email is not None and email.lower() != user.email:
            existing_user = await self.user_repository.find_by_email(email)
            if existing_user is not None and existing_user.id != user.id:
                raise DuplicateEntityError("User", "email", email)

        password_hash = None
        if request.password is not None:
            password_hash = self.auth_service.hash_password(request.password)

        user.update_profile(name=request.name, email=email, password_hash=password_hash)
        return await self.user_repository.update(user)

    async def delete_user(self, user_id: str) -> None:
        """Delete a user. Their tasks and collaborations are left in place."""
        await self.get_user(user_id)
        await self.user_repository.delete(user_id)
        logger.info(f"Deleted user {user_id}")

    async def logout(self, token: str) -> None:
        """Revoke a token until it would have expired anyway."""
        expires_at = self.auth_service.get_token_expiry(token)
        if expires_at is None:
            expires_at = utc_now() + FALLBACK_REVOCATION_TTL

        await self.token_blacklist_repository.add(token, expires_at)
        logger.info("Access token revoked")

    async def is_token_revoked(self, token: str) -> bool:
        expires_at = await self.token_blacklist_repository.find_expiry(token)
        return expires_at is not None and expires_at > utc_now()

    async def purge_expired_tokens(self) -> int:
        removed = await self.token_blacklist_repository.delete_expired(utc_now())
        if removed:
            logger.info(f"Purged {removed} expired revoked tokens")
        return removed
