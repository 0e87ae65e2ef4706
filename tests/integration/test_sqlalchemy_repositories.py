"""
Integration tests for the SQLAlchemy repositories on in-memory SQLite.
"""

import pytest
from datetime import datetime, timedelta, timezone

from sqlalchemy.pool import StaticPool

from taskflow.domain.models.base import DuplicateEntityError, EntityNotFoundError
from taskflow.domain.models.category import Category
from taskflow.domain.models.collaboration import CollaborationRole, TaskCollaboration
from taskflow.domain.models.task import Task, TaskStatus
from taskflow.domain.models.user import User
from taskflow.infrastructure.db.database import (
    create_engine,
    create_session_factory,
    create_tables,
)
from taskflow.infrastructure.repositories import (
    SQLAlchemyCategoryRepository,
    SQLAlchemyTaskCollaborationRepository,
    SQLAlchemyTaskRepository,
    SQLAlchemyTokenBlacklistRepository,
    SQLAlchemyUserRepository,
)


@pytest.fixture
async def session_factory():
    engine = create_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await create_tables(engine)
    yield create_session_factory(engine)
    await engine.dispose()


def build_task(**overrides) -> Task:
    fields = {"title": "Task", "created_by_id": "alice", "assigned_user_id": "bob"}
    fields.update(overrides)
    return Task(**fields)


class TestUserRepository:
    """Test cases for SQLAlchemyUserRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, session_factory):
        repository = SQLAlchemyUserRepository(session_factory)

        saved = await repository.save(User(name="Ann", email="Ann@Example.com", password_hash="h"))

        assert saved.id is not None
        found = await repository.find_by_email("ann@example.com")
        assert found.id == saved.id
        assert found.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_duplicate_email(self, session_factory):
        repository = SQLAlchemyUserRepository(session_factory)
        await repository.save(User(name="Ann", email="ann@example.com", password_hash="h"))

        with pytest.raises(DuplicateEntityError):
            await repository.save(User(name="Other", email="ann@example.com", password_hash="h"))

    @pytest.mark.asyncio
    async def test_update_and_delete(self, session_factory):
        repository = SQLAlchemyUserRepository(session_factory)
        user = await repository.save(User(name="Ann", email="ann@example.com", password_hash="h"))

        user.update_profile(name="Annie")
        await repository.update(user)
        assert (await repository.find_by_id(user.id)).name == "Annie"

        assert await repository.delete(user.id) is True
        assert await repository.delete(user.id) is False
        assert await repository.find_all() == []

    @pytest.mark.asyncio
    async def test_update_missing(self, session_factory):
        repository = SQLAlchemyUserRepository(session_factory)

        with pytest.raises(EntityNotFoundError):
            await repository.update(User(id="missing", name="Ann", email="ann@example.com", password_hash="h"))


class TestCategoryRepository:
    """Test cases for SQLAlchemyCategoryRepository."""

    @pytest.mark.asyncio
    async def test_unique_name_per_user(self, session_factory):
        repository = SQLAlchemyCategoryRepository(session_factory)
        await repository.save(Category(name="Work", user_id="alice"))
        await repository.save(Category(name="Work", user_id="bob"))

        with pytest.raises(DuplicateEntityError):
            await repository.save(Category(name="Work", user_id="alice"))

        found = await repository.find_by_name_and_user_id("Work", "bob")
        assert found.user_id == "bob"
        assert len(await repository.find_by_user_id("alice")) == 1


class TestTaskRepository:
    """Test cases for SQLAlchemyTaskRepository."""

    @pytest.mark.asyncio
    async def test_round_trip_keeps_fields(self, session_factory):
        repository = SQLAlchemyTaskRepository(session_factory)
        due = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)

        saved = await repository.save(build_task(due_date=due, category_id="cat", status=TaskStatus.IN_PROGRESS))
        found = await repository.find_by_id(saved.id)

        assert found.due_date == due
        assert found.status is TaskStatus.IN_PROGRESS
        assert found.category_id == "cat"

    @pytest.mark.asyncio
    async def test_find_by_user_is_creator_or_assignee_newest_first(self, session_factory):
        repository = SQLAlchemyTaskRepository(session_factory)
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        older = await repository.save(build_task(title="Older", created_at=base))
        newer = await repository.save(build_task(
            title="Newer", created_by_id="carol", assigned_user_id="alice",
            created_at=base + timedelta(days=1)
        ))
        await repository.save(build_task(title="Other", created_by_id="carol", assigned_user_id="dave"))

        tasks = await repository.find_by_user_id("alice")

        assert [t.id for t in tasks] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_title_lookup_scopes_by_category(self, session_factory):
        repository = SQLAlchemyTaskRepository(session_factory)
        uncategorised = await repository.save(build_task(title="Same"))
        await repository.save(build_task(title="Same", category_id="cat"))

        found = await repository.find_by_title_and_category("Same", None)

        assert found.id == uncategorised.id
        assert await repository.find_by_title_and_category("Same", "other") is None

    @pytest.mark.asyncio
    async def test_filters(self, session_factory):
        repository = SQLAlchemyTaskRepository(session_factory)
        done = await repository.save(build_task(title="Done", status=TaskStatus.COMPLETED, category_id="cat"))
        await repository.save(build_task(title="Open"))

        assert [t.id for t in await repository.find_by_status(TaskStatus.COMPLETED)] == [done.id]
        assert [t.id for t in await repository.find_by_category_id("cat")] == [done.id]
        assert len(await repository.find_by_assigned_user("bob")) == 2
        assert len(await repository.find_by_created_user("alice")) == 2

    @pytest.mark.asyncio
    async def test_update(self, session_factory):
        repository = SQLAlchemyTaskRepository(session_factory)
        task = await repository.save(build_task())

        task.apply_changes({"status": "COMPLETED", "title": "Renamed"})
        await repository.update(task)

        found = await repository.find_by_id(task.id)
        assert found.title == "Renamed"
        assert found.status is TaskStatus.COMPLETED


class TestCollaborationRepository:
    """Test cases for SQLAlchemyTaskCollaborationRepository."""

    @pytest.mark.asyncio
    async def test_unique_key_maps_to_duplicate(self, session_factory):
        repository = SQLAlchemyTaskCollaborationRepository(session_factory)
        await repository.save(TaskCollaboration(task_id="t1", user_id="u1", role=CollaborationRole.VIEWER))

        with pytest.raises(DuplicateEntityError):
            await repository.save(TaskCollaboration(task_id="t1", user_id="u1", role=CollaborationRole.OWNER))

    @pytest.mark.asyncio
    async def test_delete_single_and_all(self, session_factory):
        repository = SQLAlchemyTaskCollaborationRepository(session_factory)
        for user_id in ("u1", "u2", "u3"):
            await repository.save(TaskCollaboration(task_id="t1", user_id=user_id))
        await repository.save(TaskCollaboration(task_id="t2", user_id="u1"))

        assert await repository.delete("t1", "u1") is True
        assert await repository.delete("t1", "u1") is False
        assert await repository.delete_all_by_task_id("t1") == 2
        assert await repository.find_by_task_id("t1") == []
        assert [c.task_id for c in await repository.find_by_user_id("u1")] == ["t2"]

    @pytest.mark.asyncio
    async def test_find_by_task_and_user(self, session_factory):
        repository = SQLAlchemyTaskCollaborationRepository(session_factory)
        await repository.save(TaskCollaboration(task_id="t1", user_id="u1", role=CollaborationRole.OWNER))

        found = await repository.find_by_task_and_user("t1", "u1")

        assert found.role is CollaborationRole.OWNER
        assert await repository.find_by_task_and_user("t1", "u2") is None


class TestTokenBlacklistRepository:
    """Test cases for SQLAlchemyTokenBlacklistRepository."""

    @pytest.mark.asyncio
    async def test_add_is_idempotent_and_purge(self, session_factory):
        repository = SQLAlchemyTokenBlacklistRepository(session_factory)
        now = datetime(2024, 6, 1, tzinfo=timezone.utc)
        await repository.add("old", now - timedelta(hours=1))
        await repository.add("old", now + timedelta(hours=5))
        await repository.add("fresh", now + timedelta(hours=1))

        assert await repository.find_expiry("old") == now - timedelta(hours=1)
        assert await repository.delete_expired(now) == 1
        assert await repository.find_expiry("old") is None
        assert await repository.find_expiry("fresh") == now + timedelta(hours=1)
