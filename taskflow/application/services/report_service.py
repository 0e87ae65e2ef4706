"""
Report service.
Aggregates task data per user and per team.
"""

import logging
from collections import Counter
from datetime import datetime, tzinfo
from typing import Callable, Dict, Iterable, List, Optional
from zoneinfo import ZoneInfo

from taskflow.application.dto.report_dto import (
    CategoryBreakdownDTO,
    CompletedTasksReportDTO,
    TeamMemberReportDTO,
    UserTaskReportDTO,
)
from taskflow.domain.models.base import ValidationError, ensure_utc, utc_now
from taskflow.domain.models.task import Task, TaskStatus
from taskflow.domain.repositories.category_repository import CategoryRepository
from taskflow.domain.repositories.task_repository import TaskRepository
from taskflow.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY_NAME = "Unknown"


def start_of_month(now: datetime, tz: tzinfo) -> datetime:
    """First instant of the calendar month containing ``now`` in ``tz``, as UTC."""
    local_now = ensure_utc(now).astimezone(tz)
    first = local_now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    return ensure_utc(first)


class ReportService:
    """
    Report service.

    "Now" comes from the injected clock so reports are reproducible in tests.
    The month boundary for completed_this_month is taken in ``report_timezone``.
    """

    def __init__(
        self,
        task_repository: TaskRepository,
        category_repository: CategoryRepository,
        user_repository: UserRepository,
        clock: Callable[[], datetime] = utc_now,
        report_timezone: str = "UTC"
    ):
        self.task_repository = task_repository
        self.category_repository = category_repository
        self.user_repository = user_repository
        self.clock = clock
        self.report_timezone = ZoneInfo(report_timezone)

    async def get_user_report(self, user_id: str) -> UserTaskReportDTO:
        """Report over the tasks the user created or is assigned to."""
        tasks = await self.task_repository.find_by_user_id(user_id)
        now = ensure_utc(self.clock())
        month_start = start_of_month(now, self.report_timezone)

        tasks_by_status = {status.value: 0 for status in TaskStatus}
        for task in tasks:
            tasks_by_status[task.status.value] += 1

        completed_this_month = sum(
            1 for task in tasks
            if task.is_completed and ensure_utc(task.updated_at) >= month_start
        )

        return UserTaskReportDTO(
            total_tasks=len(tasks),
            tasks_by_status=tasks_by_status,
            tasks_by_category=await self._category_breakdown(tasks),
            overdue_tasks=self._count_overdue(tasks, now),
            completed_this_month=completed_this_month,
        )

    async def get_team_report(self, user_ids: List[str]) -> List[TeamMemberReportDTO]:
        """
        One line per known user, in the order given.
        Unknown ids are skipped.
        """
        now = ensure_utc(self.clock())
        report = []

        for user_id in user_ids:
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logger.debug(f"Skipping unknown user {user_id} in team report")
                continue

            tasks = await self.task_repository.find_by_assigned_user(user_id)
            report.append(TeamMemberReportDTO(
                user_id=user.id,
                user_name=user.name,
                assigned_tasks=len(tasks),
                completed_tasks=sum(1 for task in tasks if task.is_completed),
                overdue_tasks=self._count_overdue(tasks, now),
            ))

        return report

    async def get_completed_tasks_in_period(
        self,
        user_id: str,
        start_date: datetime,
        end_date: datetime
    ) -> CompletedTasksReportDTO:
        """
        Count the user's tasks completed within [start_date, end_date].
        Both bounds are inclusive. An inverted range counts nothing.
        """
        start = self._parse_bound(start_date, "start_date")
        end = self._parse_bound(end_date, "end_date")

        tasks = await self.task_repository.find_by_user_id(user_id)
        completed = sum(
            1 for task in tasks
            if task.is_completed and start <= ensure_utc(task.updated_at) <= end
        )

        return CompletedTasksReportDTO(
            user_id=user_id,
            start_date=start,
            end_date=end,
            completed_tasks=completed,
        )

    async def _category_breakdown(self, tasks: Iterable[Task]) -> List[CategoryBreakdownDTO]:
        counts = Counter(task.category_id for task in tasks if task.category_id is not None)
        names: Dict[str, str] = {}

        breakdown = []
        for category_id, count in counts.items():
            if category_id not in names:
                names[category_id] = await self._category_name(category_id)
            breakdown.append(CategoryBreakdownDTO(
                category_id=category_id,
                category_name=names[category_id],
                count=count,
            ))

        return breakdown

    async def _category_name(self, category_id: str) -> str:
        category = await self.category_repository.find_by_id(category_id)
        if category is None:
            return UNKNOWN_CATEGORY_NAME
        return category.name

    @staticmethod
    def _count_overdue(tasks: Iterable[Task], now: datetime) -> int:
        return sum(1 for task in tasks if task.is_overdue(now))

    @staticmethod
    def _parse_bound(value: Optional[datetime], field: str) -> datetime:
        if not isinstance(value, datetime):
            raise ValidationError(f"{field} must be a datetime", field)
        return ensure_utc(value)
