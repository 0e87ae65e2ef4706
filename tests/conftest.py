"""
Shared fixtures: in-memory repositories and a deterministic auth service.
"""

import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest

from taskflow.domain.models.base import DuplicateEntityError, EntityNotFoundError, ensure_utc
from taskflow.domain.models.category import Category
from taskflow.domain.models.collaboration import CollaborationRole, TaskCollaboration
from taskflow.domain.models.task import Task, TaskStatus
from taskflow.domain.models.user import User
from taskflow.domain.repositories import (
    CategoryRepository,
    TaskCollaborationRepository,
    TaskRepository,
    TokenBlacklistRepository,
    UserRepository,
)
from taskflow.domain.services import AuthService, PermissionResolver
from taskflow.infrastructure.container import ServiceContainer


FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


class InMemoryUserRepository(UserRepository):
    """Mock user repository keeping users in a dict."""

    def __init__(self):
        self.data: Dict[str, User] = {}

    async def save(self, user: User) -> User:
        if any(u.email == user.email for u in self.data.values()):
            raise DuplicateEntityError("User", "email", user.email)
        if user.id is None:
            user.id = new_id()
        self.data[user.id] = user
        return user

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.data.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        email = str(email).strip().lower()
        return next((u for u in self.data.values() if u.email == email), None)

    async def find_all(self) -> List[User]:
        return list(self.data.values())

    async def update(self, user: User) -> User:
        if user.id not in self.data:
            raise EntityNotFoundError("User", user.id)
        self.data[user.id] = user
        return user

    async def delete(self, user_id: str) -> bool:
        return self.data.pop(user_id, None) is not None


class InMemoryCategoryRepository(CategoryRepository):
    """Mock category repository that counts lookups by id."""

    def __init__(self):
        self.data: Dict[str, Category] = {}
        self.find_by_id_calls: List[str] = []

    async def save(self, category: Category) -> Category:
        if category.id is None:
            category.id = new_id()
        self.data[category.id] = category
        return category

    async def find_by_id(self, category_id: str) -> Optional[Category]:
        self.find_by_id_calls.append(category_id)
        return self.data.get(category_id)

    async def find_by_user_id(self, user_id: str) -> List[Category]:
        return [c for c in self.data.values() if c.user_id == user_id]

    async def find_by_name_and_user_id(self, name: str, user_id: str) -> Optional[Category]:
        return next(
            (c for c in self.data.values() if c.user_id == user_id and c.name == name),
            None
        )

    async def update(self, category: Category) -> Category:
        if category.id not in self.data:
            raise EntityNotFoundError("Category", category.id)
        self.data[category.id] = category
        return category

    async def delete(self, category_id: str) -> bool:
        return self.data.pop(category_id, None) is not None


class InMemoryTaskRepository(TaskRepository):
    """Mock task repository. Listings keep insertion order."""

    def __init__(self):
        self.data: Dict[str, Task] = {}

    async def save(self, task: Task) -> Task:
        if task.id is None:
            task.id = new_id()
        self.data[task.id] = task
        return task

    async def find_by_id(self, task_id: str) -> Optional[Task]:
        return self.data.get(task_id)

    async def find_by_user_id(self, user_id: str) -> List[Task]:
        return [t for t in self.data.values() if t.involves(user_id)]

    async def find_by_category_id(self, category_id: str) -> List[Task]:
        return [t for t in self.data.values() if t.category_id == category_id]

    async def find_by_status(self, status: TaskStatus) -> List[Task]:
        return [t for t in self.data.values() if t.status == status]

    async def find_by_assigned_user(self, user_id: str) -> List[Task]:
        return [t for t in self.data.values() if t.assigned_user_id == user_id]

    async def find_by_created_user(self, user_id: str) -> List[Task]:
        return [t for t in self.data.values() if t.created_by_id == user_id]

    async def find_by_title_and_category(
        self,
        title: str,
        category_id: Optional[str]
    ) -> Optional[Task]:
        return next(
            (t for t in self.data.values() if t.title == title and t.category_id == category_id),
            None
        )

    async def find_all(self) -> List[Task]:
        return list(self.data.values())

    async def update(self, task: Task) -> Task:
        if task.id not in self.data:
            raise EntityNotFoundError("Task", task.id)
        self.data[task.id] = task
        return task

    async def delete(self, task_id: str) -> bool:
        return self.data.pop(task_id, None) is not None


class InMemoryCollaborationRepository(TaskCollaborationRepository):
    """Mock collaboration repository enforcing the (task, user) unique key."""

    def __init__(self):
        self.data: Dict[tuple, TaskCollaboration] = {}
        self.lookups = 0
        self.should_fail = False

    async def save(self, collaboration: TaskCollaboration) -> TaskCollaboration:
        if self.should_fail:
            raise Exception("Repository error")
        key = (collaboration.task_id, collaboration.user_id)
        if key in self.data:
            raise DuplicateEntityError("TaskCollaboration", "user_id", collaboration.user_id)
        if collaboration.id is None:
            collaboration.id = new_id()
        self.data[key] = collaboration
        return collaboration

    async def find_by_task_id(self, task_id: str) -> List[TaskCollaboration]:
        return [c for (t, _), c in self.data.items() if t == task_id]

    async def find_by_user_id(self, user_id: str) -> List[TaskCollaboration]:
        return [c for (_, u), c in self.data.items() if u == user_id]

    async def find_by_task_and_user(self, task_id: str, user_id: str) -> Optional[TaskCollaboration]:
        self.lookups += 1
        return self.data.get((task_id, user_id))

    async def delete(self, task_id: str, user_id: str) -> bool:
        return self.data.pop((task_id, user_id), None) is not None

    async def delete_all_by_task_id(self, task_id: str) -> int:
        keys = [key for key in self.data if key[0] == task_id]
        for key in keys:
            del self.data[key]
        return len(keys)


class InMemoryTokenBlacklistRepository(TokenBlacklistRepository):
    """Mock revoked token store."""

    def __init__(self):
        self.data: Dict[str, datetime] = {}

    async def add(self, token: str, expires_at: datetime) -> None:
        self.data.setdefault(token, ensure_utc(expires_at))

    async def find_expiry(self, token: str) -> Optional[datetime]:
        return self.data.get(token)

    async def delete_expired(self, now: datetime) -> int:
        expired = [token for token, expires_at in self.data.items() if expires_at <= now]
        for token in expired:
            del self.data[token]
        return len(expired)


class FakeAuthService(AuthService):
    """Reversible hashing and opaque tokens, for tests only."""

    def __init__(self):
        self.tokens: Dict[str, str] = {}
        self.expiries: Dict[str, datetime] = {}

    def hash_password(self, password: str) -> str:
        return f"hashed::{password}"

    def verify_password(self, password: str, hashed_password: str) -> bool:
        return hashed_password == f"hashed::{password}"

    def generate_access_token(self, user_id: str, email: str) -> str:
        token = f"token-{new_id()}"
        self.tokens[token] = user_id
        self.expiries[token] = datetime(2099, 1, 1, tzinfo=timezone.utc)
        return token

    def verify_token(self, token: str) -> Optional[str]:
        return self.tokens.get(token)

    def get_token_expiry(self, token: str) -> Optional[datetime]:
        return self.expiries.get(token)


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def category_repository():
    return InMemoryCategoryRepository()


@pytest.fixture
def task_repository():
    return InMemoryTaskRepository()


@pytest.fixture
def collaboration_repository():
    return InMemoryCollaborationRepository()


@pytest.fixture
def token_blacklist_repository():
    return InMemoryTokenBlacklistRepository()


@pytest.fixture
def auth_service():
    return FakeAuthService()


@pytest.fixture
def permission_resolver(collaboration_repository):
    return PermissionResolver(collaboration_repository)


@pytest.fixture
def container(
    user_repository,
    category_repository,
    task_repository,
    collaboration_repository,
    token_blacklist_repository,
    auth_service
):
    return ServiceContainer.wire(
        user_repository=user_repository,
        category_repository=category_repository,
        task_repository=task_repository,
        collaboration_repository=collaboration_repository,
        token_blacklist_repository=token_blacklist_repository,
        auth_service=auth_service,
        clock=lambda: FIXED_NOW,
    )


def make_task(**overrides) -> Task:
    """Build a persisted-looking task with sensible defaults."""
    fields = {
        "id": new_id(),
        "title": f"Task {new_id()[:8]}",
        "created_by_id": "creator",
        "assigned_user_id": "assignee",
    }
    fields.update(overrides)
    return Task(**fields)


def grant(task: Task, user_id: str, role: CollaborationRole) -> TaskCollaboration:
    return TaskCollaboration(id=new_id(), task_id=task.id, user_id=user_id, role=role)
