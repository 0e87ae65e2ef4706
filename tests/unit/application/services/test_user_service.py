"""
Unit tests for the user service.
"""

import pytest
from datetime import datetime, timedelta, timezone

from taskflow.application.dto.user_dto import RegisterRequestDTO, UpdateUserRequestDTO
from taskflow.domain.models.base import (
    AuthenticationError,
    DuplicateEntityError,
    EntityNotFoundError,
    utc_now,
)


@pytest.fixture
def user_service(container):
    return container.user_service


def register_request(email="ann@example.com", password="secret1") -> RegisterRequestDTO:
    return RegisterRequestDTO(name="Ann", email=email, password=password)


class TestRegistration:
    """Test cases for registration and login."""

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, user_service):
        user = await user_service.register(register_request())

        assert user.id is not None
        assert user.password_hash == "hashed::secret1"

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, user_service):
        await user_service.register(register_request())

        with pytest.raises(DuplicateEntityError):
            await user_service.register(register_request(email="ANN@example.com"))

    @pytest.mark.asyncio
    async def test_authenticate(self, user_service, auth_service):
        user = await user_service.register(register_request())

        found, token = await user_service.authenticate("ann@example.com", "secret1")

        assert found.id == user.id
        assert auth_service.verify_token(token) == user.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email,password", [
        ("ann@example.com", "wrong-password"),
        ("nobody@example.com", "secret1"),
    ])
    async def test_authenticate_failures_look_the_same(self, email, password, user_service):
        await user_service.register(register_request())

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await user_service.authenticate(email, password)


class TestProfile:
    """Test cases for profile management."""

    @pytest.mark.asyncio
    async def test_get_missing_user(self, user_service):
        with pytest.raises(EntityNotFoundError):
            await user_service.get_user("missing")

    @pytest.mark.asyncio
    async def test_update_profile(self, user_service):
        user = await user_service.register(register_request())

        updated = await user_service.update_user(
            user.id, UpdateUserRequestDTO(name="Annie", password="another1")
        )

        assert updated.name == "Annie"
        assert updated.password_hash == "hashed::another1"
        assert updated.email == "ann@example.com"

    @pytest.mark.asyncio
    async def test_update_email_taken(self, user_service):
        await user_service.register(register_request(email="bob@example.com"))
        user = await user_service.register(register_request())

        with pytest.raises(DuplicateEntityError):
            await user_service.update_user(user.id, UpdateUserRequestDTO(email="bob@example.com"))

    @pytest.mark.asyncio
    async def test_delete_user(self, user_service):
        user = await user_service.register(register_request())

        await user_service.delete_user(user.id)

        assert await user_service.list_users() == []
        with pytest.raises(EntityNotFoundError):
            await user_service.delete_user(user.id)


class TestTokenRevocation:
    """Test cases for logout and the token blacklist."""

    @pytest.mark.asyncio
    async def test_logout_revokes_token(self, user_service):
        await user_service.register(register_request())
        _, token = await user_service.authenticate("ann@example.com", "secret1")

        assert not await user_service.is_token_revoked(token)
        await user_service.logout(token)

        assert await user_service.is_token_revoked(token)

    @pytest.mark.asyncio
    async def test_expired_entries_no_longer_count(self, user_service, token_blacklist_repository):
        await token_blacklist_repository.add("old", utc_now() - timedelta(minutes=1))

        assert not await user_service.is_token_revoked("old")

    @pytest.mark.asyncio
    async def test_purge_expired_tokens(self, user_service, token_blacklist_repository):
        await token_blacklist_repository.add("old", datetime(2000, 1, 1, tzinfo=timezone.utc))
        await token_blacklist_repository.add("fresh", utc_now() + timedelta(hours=1))

        removed = await user_service.purge_expired_tokens()

        assert removed == 1
        assert set(token_blacklist_repository.data) == {"fresh"}
