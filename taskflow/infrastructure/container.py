"""
Service container.
Builds every service once per process with explicit constructor wiring.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine

from taskflow.application.services import (
    CategoryService,
    CollaborationService,
    ReportService,
    TaskService,
    UserService,
)
from taskflow.config import Settings
from taskflow.domain.models.base import utc_now
from taskflow.domain.repositories import (
    CategoryRepository,
    TaskCollaborationRepository,
    TaskRepository,
    TokenBlacklistRepository,
    UserRepository,
)
from taskflow.domain.services import AuthService, PermissionResolver
from taskflow.infrastructure.auth.jwt_handler import JWTHandler
from taskflow.infrastructure.db.database import create_engine, create_session_factory
from taskflow.infrastructure.repositories import (
    SQLAlchemyCategoryRepository,
    SQLAlchemyTaskCollaborationRepository,
    SQLAlchemyTaskRepository,
    SQLAlchemyTokenBlacklistRepository,
    SQLAlchemyUserRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Holds the application services and the ports they were built from."""

    auth_service: AuthService
    permission_resolver: PermissionResolver
    user_service: UserService
    task_service: TaskService
    collaboration_service: CollaborationService
    category_service: CategoryService
    report_service: ReportService
    engine: Optional[AsyncEngine] = None

    @classmethod
    def wire(
        cls,
        *,
        user_repository: UserRepository,
        category_repository: CategoryRepository,
        task_repository: TaskRepository,
        collaboration_repository: TaskCollaborationRepository,
        token_blacklist_repository: TokenBlacklistRepository,
        auth_service: AuthService,
        clock: Callable[[], datetime] = utc_now,
        report_timezone: str = "UTC",
        engine: Optional[AsyncEngine] = None
    ) -> "ServiceContainer":
        """Build the services on top of any set of port implementations."""
        permission_resolver = PermissionResolver(collaboration_repository)

        return cls(
            auth_service=auth_service,
            permission_resolver=permission_resolver,
            user_service=UserService(
                user_repository, token_blacklist_repository, auth_service
            ),
            task_service=TaskService(
                task_repository, collaboration_repository, permission_resolver
            ),
            collaboration_service=CollaborationService(
                collaboration_repository, task_repository, permission_resolver
            ),
            category_service=CategoryService(category_repository),
            report_service=ReportService(
                task_repository,
                category_repository,
                user_repository,
                clock=clock,
                report_timezone=report_timezone,
            ),
            engine=engine,
        )

    async def dispose(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()


def build_container(settings: Settings, **engine_kwargs) -> ServiceContainer:
    """Wire the SQLAlchemy adapters and the JWT handler from settings."""
    engine = create_engine(
        settings.database_url_async, echo=settings.database_echo, **engine_kwargs
    )
    session_factory = create_session_factory(engine)

    logger.info(f"Service container built for {settings.environment} environment")

    return ServiceContainer.wire(
        user_repository=SQLAlchemyUserRepository(session_factory),
        category_repository=SQLAlchemyCategoryRepository(session_factory),
        task_repository=SQLAlchemyTaskRepository(session_factory),
        collaboration_repository=SQLAlchemyTaskCollaborationRepository(session_factory),
        token_blacklist_repository=SQLAlchemyTokenBlacklistRepository(session_factory),
        auth_service=JWTHandler(
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            access_token_expire_minutes=settings.jwt_access_token_expire_minutes,
        ),
        report_timezone=settings.report_timezone,
        engine=engine,
    )


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency returning the container stored during startup."""
    return request.app.state.container
