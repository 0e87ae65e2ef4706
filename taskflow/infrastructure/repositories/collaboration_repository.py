"""
Task collaboration repository implementation using SQLAlchemy.
"""

from typing import Optional, List

from sqlalchemy import select, delete

from taskflow.domain.models.collaboration import TaskCollaboration
from taskflow.domain.repositories.collaboration_repository import TaskCollaborationRepository
from taskflow.infrastructure.db.models import TaskCollaborationModel
from taskflow.infrastructure.mappers.collaboration_mapper import CollaborationMapper
from .base import SQLAlchemyRepository


class SQLAlchemyTaskCollaborationRepository(SQLAlchemyRepository, TaskCollaborationRepository):
    """SQLAlchemy implementation of the collaboration repository."""

    def __init__(self, session_factory):
        super().__init__(session_factory)
        self.mapper = CollaborationMapper()

    async def save(self, collaboration: TaskCollaboration) -> TaskCollaboration:
        """Insert a grant; a second grant for the same (task, user) is a duplicate."""
        model = self.mapper.domain_to_model(collaboration)
        self.assign_id(model)

        async with self.session_factory() as session:
            session.add(model)
            await self.commit_unique(
                session, "TaskCollaboration", "user_id", collaboration.user_id
            )

        return self.mapper.model_to_domain(model)

    async def find_by_task_id(self, task_id: str) -> List[TaskCollaboration]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TaskCollaborationModel)
                .where(TaskCollaborationModel.task_id == task_id)
                .order_by(TaskCollaborationModel.created_at)
            )
            return [self.mapper.model_to_domain(model) for model in result.scalars()]

    async def find_by_user_id(self, user_id: str) -> List[TaskCollaboration]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TaskCollaborationModel)
                .where(TaskCollaborationModel.user_id == user_id)
                .order_by(TaskCollaborationModel.created_at)
            )
            return [self.mapper.model_to_domain(model) for model in result.scalars()]

    async def find_by_task_and_user(
        self,
        task_id: str,
        user_id: str
    ) -> Optional[TaskCollaboration]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TaskCollaborationModel).where(
                    TaskCollaborationModel.task_id == task_id,
                    TaskCollaborationModel.user_id == user_id
                )
            )
            model = result.scalar_one_or_none()
            return self.mapper.model_to_domain(model) if model else None

    async def delete(self, task_id: str, user_id: str) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(TaskCollaborationModel).where(
                    TaskCollaborationModel.task_id == task_id,
                    TaskCollaborationModel.user_id == user_id
                )
            )
            await session.commit()
            return result.rowcount > 0

    async def delete_all_by_task_id(self, task_id: str) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(TaskCollaborationModel).where(TaskCollaborationModel.task_id == task_id)
            )
            await session.commit()
            return result.rowcount
