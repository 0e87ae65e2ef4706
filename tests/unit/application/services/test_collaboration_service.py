"""
Unit tests for the collaboration service.
"""

import pytest

from conftest import grant, make_task
from taskflow.application.dto.collaboration_dto import AddCollaboratorRequestDTO
from taskflow.domain.models.base import (
    DuplicateEntityError,
    EntityNotFoundError,
    PermissionDeniedError,
)
from taskflow.domain.models.collaboration import CollaborationRole, PermissionLevel


@pytest.fixture
def collaboration_service(container):
    return container.collaboration_service


def add_request(task_id: str, user_id: str, role=CollaborationRole.VIEWER) -> AddCollaboratorRequestDTO:
    return AddCollaboratorRequestDTO(task_id=task_id, user_id=user_id, role=role)


class TestAddCollaborator:
    """Test cases for granting roles."""

    @pytest.mark.asyncio
    async def test_creator_adds_collaborator(self, collaboration_service, task_repository):
        task = await task_repository.save(make_task())

        collaboration = await collaboration_service.add_collaborator(
            add_request(task.id, "dave", CollaborationRole.COLLABORATOR), "creator"
        )

        assert collaboration.user_id == "dave"
        assert collaboration.role is CollaborationRole.COLLABORATOR

    @pytest.mark.asyncio
    async def test_owner_row_can_add(self, collaboration_service, task_repository, collaboration_repository):
        task = await task_repository.save(make_task())
        await collaboration_repository.save(grant(task, "co-owner", CollaborationRole.OWNER))

        await collaboration_service.add_collaborator(add_request(task.id, "dave"), "co-owner")

        assert await collaboration_repository.find_by_task_and_user(task.id, "dave") is not None

    @pytest.mark.asyncio
    async def test_assignee_cannot_add_but_has_collaborator_permission(
        self, collaboration_service, task_repository
    ):
        task = await task_repository.save(make_task())

        with pytest.raises(PermissionDeniedError):
            await collaboration_service.add_collaborator(add_request(task.id, "dave"), "assignee")

        level = await collaboration_service.check_permission(task.id, "assignee")
        assert level is PermissionLevel.COLLABORATOR

    @pytest.mark.asyncio
    async def test_missing_task(self, collaboration_service):
        with pytest.raises(EntityNotFoundError):
            await collaboration_service.add_collaborator(add_request("missing", "dave"), "creator")

    @pytest.mark.asyncio
    async def test_duplicate_grant(self, collaboration_service, task_repository):
        task = await task_repository.save(make_task())
        await collaboration_service.add_collaborator(add_request(task.id, "dave"), "creator")

        with pytest.raises(DuplicateEntityError):
            await collaboration_service.add_collaborator(
                add_request(task.id, "dave", CollaborationRole.OWNER), "creator"
            )

    @pytest.mark.asyncio
    async def test_store_conflict_surfaces_as_duplicate(
        self, collaboration_service, task_repository, collaboration_repository, monkeypatch
    ):
        """A concurrent insert that wins the race is reported the same way."""
        task = await task_repository.save(make_task())

        async def no_row(task_id, user_id):
            return None

        await collaboration_repository.save(grant(task, "dave", CollaborationRole.VIEWER))
        monkeypatch.setattr(collaboration_repository, "find_by_task_and_user", no_row)

        with pytest.raises(DuplicateEntityError):
            await collaboration_service.add_collaborator(add_request(task.id, "dave"), "creator")


class TestListCollaborators:
    """Test cases for listing grants."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("actor", ["creator", "assignee", "viewer"])
    async def test_visible_to_involved_users(
        self, actor, collaboration_service, task_repository, collaboration_repository
    ):
        task = await task_repository.save(make_task())
        await collaboration_repository.save(grant(task, "viewer", CollaborationRole.VIEWER))

        rows = await collaboration_service.list_task_collaborators(task.id, actor)

        assert [row.user_id for row in rows] == ["viewer"]

    @pytest.mark.asyncio
    async def test_hidden_from_strangers(self, collaboration_service, task_repository):
        task = await task_repository.save(make_task())

        with pytest.raises(PermissionDeniedError):
            await collaboration_service.list_task_collaborators(task.id, "stranger")

    @pytest.mark.asyncio
    async def test_list_user_collaborations(self, collaboration_service, task_repository, collaboration_repository):
        first = await task_repository.save(make_task())
        second = await task_repository.save(make_task())
        await collaboration_repository.save(grant(first, "dave", CollaborationRole.VIEWER))
        await collaboration_repository.save(grant(second, "dave", CollaborationRole.OWNER))

        rows = await collaboration_service.list_user_collaborations("dave")

        assert {row.task_id for row in rows} == {first.id, second.id}


class TestRemoveCollaborator:
    """Test cases for revoking grants."""

    @pytest.mark.asyncio
    async def test_remove_then_re_add(self, collaboration_service, task_repository):
        task = await task_repository.save(make_task())
        await collaboration_service.add_collaborator(add_request(task.id, "dave"), "creator")

        await collaboration_service.remove_collaborator(task.id, "dave", "creator")
        rows = await collaboration_service.list_task_collaborators(task.id, "creator")
        assert "dave" not in [row.user_id for row in rows]

        again = await collaboration_service.add_collaborator(add_request(task.id, "dave"), "creator")
        assert again.user_id == "dave"

    @pytest.mark.asyncio
    async def test_remove_missing_row_is_silent(self, collaboration_service, task_repository):
        task = await task_repository.save(make_task())

        await collaboration_service.remove_collaborator(task.id, "nobody", "creator")

    @pytest.mark.asyncio
    async def test_non_owner_cannot_remove(self, collaboration_service, task_repository, collaboration_repository):
        task = await task_repository.save(make_task())
        await collaboration_repository.save(grant(task, "dave", CollaborationRole.COLLABORATOR))

        with pytest.raises(PermissionDeniedError):
            await collaboration_service.remove_collaborator(task.id, "dave", "dave")

        assert await collaboration_repository.find_by_task_and_user(task.id, "dave") is not None


class TestCheckPermission:
    """Test cases for checking effective permission."""

    @pytest.mark.asyncio
    async def test_missing_task_and_no_permission_both_none(self, collaboration_service, task_repository):
        task = await task_repository.save(make_task())

        assert await collaboration_service.check_permission("missing", "creator") is None
        assert await collaboration_service.check_permission(task.id, "stranger") is None

    @pytest.mark.asyncio
    async def test_reports_row_role(self, collaboration_service, task_repository, collaboration_repository):
        task = await task_repository.save(make_task())
        await collaboration_repository.save(grant(task, "viewer", CollaborationRole.VIEWER))

        assert await collaboration_service.check_permission(task.id, "viewer") is PermissionLevel.VIEWER
        assert await collaboration_service.check_permission(task.id, "creator") is PermissionLevel.OWNER
