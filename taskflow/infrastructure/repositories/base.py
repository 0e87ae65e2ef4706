"""
Shared plumbing for the SQLAlchemy repositories.
"""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taskflow.domain.models.base import DuplicateEntityError
from taskflow.infrastructure.db.models import generate_uuid

logger = logging.getLogger(__name__)


class SQLAlchemyRepository:
    """
    Base class for SQLAlchemy repositories.
    Each public repository method opens its own session and commits on its own.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    @staticmethod
    def assign_id(model: Any) -> None:
        if model.id is None:
            model.id = generate_uuid()

    async def commit_unique(
        self,
        session: AsyncSession,
        entity_type: str,
        field: str,
        value: Any
    ) -> None:
        """Commit, reporting a unique-key violation as a duplicate entity."""
        try:
            await session.commit()
        except IntegrityError as e:
            await session.rollback()
            logger.info(f"Unique constraint rejected {entity_type} {field}={value!r}: {e.orig}")
            raise DuplicateEntityError(entity_type, field, value) from e
