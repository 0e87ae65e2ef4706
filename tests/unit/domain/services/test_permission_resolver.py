"""
Unit tests for the permission resolver.
"""

import pytest

from conftest import grant, make_task
from taskflow.domain.models.base import ValidationError
from taskflow.domain.models.collaboration import CollaborationRole, PermissionLevel


class TestPermissionResolver:
    """Grant paths are checked creator, assignee, collaboration row; first match wins."""

    @pytest.mark.asyncio
    async def test_creator_is_owner_even_with_viewer_row(self, permission_resolver, collaboration_repository):
        task = make_task()
        await collaboration_repository.save(grant(task, task.created_by_id, CollaborationRole.VIEWER))

        assert await permission_resolver.resolve(task, task.created_by_id) is PermissionLevel.OWNER

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", list(CollaborationRole))
    async def test_assignee_is_collaborator_regardless_of_row(
        self, role, permission_resolver, collaboration_repository
    ):
        task = make_task()
        await collaboration_repository.save(grant(task, task.assigned_user_id, role))

        level = await permission_resolver.resolve(task, task.assigned_user_id)

        assert level is PermissionLevel.COLLABORATOR

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", list(CollaborationRole))
    async def test_row_role_is_returned_verbatim(self, role, permission_resolver, collaboration_repository):
        task = make_task()
        await collaboration_repository.save(grant(task, "outsider", role))

        level = await permission_resolver.resolve(task, "outsider")

        assert level.value == role.value

    @pytest.mark.asyncio
    async def test_no_grant_is_none(self, permission_resolver):
        task = make_task()

        assert await permission_resolver.resolve(task, "stranger") is PermissionLevel.NONE

    @pytest.mark.asyncio
    async def test_implicit_grants_skip_storage(self, permission_resolver, collaboration_repository):
        task = make_task()

        await permission_resolver.resolve(task, task.created_by_id)
        await permission_resolver.resolve(task, task.assigned_user_id)

        assert collaboration_repository.lookups == 0

    @pytest.mark.asyncio
    async def test_missing_task_fails(self, permission_resolver):
        with pytest.raises(ValidationError):
            await permission_resolver.resolve(None, "someone")
