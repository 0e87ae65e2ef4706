"""
Task repository implementation using SQLAlchemy.
"""

from typing import Optional, List

from sqlalchemy import select, delete, or_

from taskflow.domain.models.base import EntityNotFoundError
from taskflow.domain.models.task import Task, TaskStatus
from taskflow.domain.repositories.task_repository import TaskRepository
from taskflow.infrastructure.db.models import TaskModel
from taskflow.infrastructure.mappers.task_mapper import TaskMapper
from .base import SQLAlchemyRepository


class SQLAlchemyTaskRepository(SQLAlchemyRepository, TaskRepository):
    """SQLAlchemy implementation of task repository. Listings are newest first."""

    def __init__(self, session_factory):
        super().__init__(session_factory)
        self.mapper = TaskMapper()

    async def save(self, task: Task) -> Task:
        """Save a new task entity."""
        model = self.mapper.domain_to_model(task)
        self.assign_id(model)

        async with self.session_factory() as session:
            session.add(model)
            await session.commit()

        return self.mapper.model_to_domain(model)

    async def find_by_id(self, task_id: str) -> Optional[Task]:
        """Get task by ID."""
        async with self.session_factory() as session:
            model = await session.get(TaskModel, task_id)
            return self.mapper.model_to_domain(model) if model else None

    async def find_by_user_id(self, user_id: str) -> List[Task]:
        """Tasks created by or assigned to the user."""
        return await self._find_where(or_(
            TaskModel.created_by_id == user_id,
            TaskModel.assigned_user_id == user_id
        ))

    async def find_by_category_id(self, category_id: str) -> List[Task]:
        return await self._find_where(TaskModel.category_id == category_id)

    async def find_by_status(self, status: TaskStatus) -> List[Task]:
        return await self._find_where(TaskModel.status == TaskStatus(status))

    async def find_by_assigned_user(self, user_id: str) -> List[Task]:
        return await self._find_where(TaskModel.assigned_user_id == user_id)

    async def find_by_created_user(self, user_id: str) -> List[Task]:
        return await self._find_where(TaskModel.created_by_id == user_id)

    async def find_by_title_and_category(
        self,
        title: str,
        category_id: Optional[str]
    ) -> Optional[Task]:
        """Exact title match within a category, or among uncategorised tasks."""
        if category_id is None:
            category_clause = TaskModel.category_id.is_(None)
        else:
            category_clause = TaskModel.category_id == category_id

        async with self.session_factory() as session:
            result = await session.execute(
                select(TaskModel)
                .where(TaskModel.title == title, category_clause)
                .limit(1)
            )
            model = result.scalars().first()
            return self.mapper.model_to_domain(model) if model else None

    async def find_all(self) -> List[Task]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TaskModel).order_by(TaskModel.created_at.desc())
            )
            return [self.mapper.model_to_domain(model) for model in result.scalars()]

    async def update(self, task: Task) -> Task:
        """Update an existing task entity."""
        async with self.session_factory() as session:
            model = await session.get(TaskModel, task.id)
            if not model:
                raise EntityNotFoundError("Task", task.id)

            self.mapper.update_model(model, task)
            await session.commit()

            return self.mapper.model_to_domain(model)

    async def delete(self, task_id: str) -> bool:
        """Delete task by ID."""
        async with self.session_factory() as session:
            result = await session.execute(delete(TaskModel).where(TaskModel.id == task_id))
            await session.commit()
            return result.rowcount > 0

    async def _find_where(self, *criteria) -> List[Task]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TaskModel)
                .where(*criteria)
                .order_by(TaskModel.created_at.desc())
            )
            return [self.mapper.model_to_domain(model) for model in result.scalars()]
