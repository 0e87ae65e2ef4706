"""
Token blacklist repository implementation using SQLAlchemy.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError

from taskflow.domain.models.base import ensure_utc
from taskflow.domain.repositories.token_blacklist_repository import TokenBlacklistRepository
from taskflow.infrastructure.db.models import TokenBlacklistModel, generate_uuid
from .base import SQLAlchemyRepository

logger = logging.getLogger(__name__)


class SQLAlchemyTokenBlacklistRepository(SQLAlchemyRepository, TokenBlacklistRepository):
    """SQLAlchemy implementation of the revoked token store."""

    async def add(self, token: str, expires_at: datetime) -> None:
        async with self.session_factory() as session:
            existing = await session.execute(
                select(TokenBlacklistModel.id).where(TokenBlacklistModel.token == token)
            )
            if existing.scalar_one_or_none() is not None:
                return

            session.add(TokenBlacklistModel(
                id=generate_uuid(),
                token=token,
                expires_at=ensure_utc(expires_at)
            ))
            try:
                await session.commit()
            except IntegrityError:
                # Revoked concurrently by another request
                await session.rollback()
                logger.debug("Token already revoked")

    async def find_expiry(self, token: str) -> Optional[datetime]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TokenBlacklistModel.expires_at).where(TokenBlacklistModel.token == token)
            )
            return ensure_utc(result.scalar_one_or_none())

    async def delete_expired(self, now: datetime) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(TokenBlacklistModel).where(TokenBlacklistModel.expires_at <= ensure_utc(now))
            )
            await session.commit()
            return result.rowcount
