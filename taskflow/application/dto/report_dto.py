"""
Report DTOs for the application layer.
Aggregates computed over a user's or a team's tasks.
"""

from typing import Dict, List
from datetime import datetime

from pydantic import Field

from .base_dto import BaseDTO, RequestDTO


class CategoryBreakdownDTO(BaseDTO):
    """Number of tasks in one category."""

    category_id: str
    category_name: str
    count: int = 0


class UserTaskReportDTO(BaseDTO):
    """Task report for a single user (creator-or-assignee task set)."""

    total_tasks: int = Field(description="Number of tasks")
    tasks_by_status: Dict[str, int] = Field(description="Histogram over every task status")
    tasks_by_category: List[CategoryBreakdownDTO] = Field(default_factory=list)
    overdue_tasks: int = Field(description="Past due and not completed")
    completed_this_month: int = Field(description="Completed since the start of the month")


class TeamMemberReportDTO(BaseDTO):
    """Per-user line of a team report, over tasks assigned to that user."""

    user_id: str
    user_name: str
    assigned_tasks: int
    completed_tasks: int
    overdue_tasks: int


class TeamReportRequestDTO(RequestDTO):
    """DTO for team report requests."""

    user_ids: List[str] = Field(description="User IDs in the order the report should follow")


class CompletedTasksReportDTO(BaseDTO):
    """Count of tasks completed within an inclusive period."""

    user_id: str
    start_date: datetime
    end_date: datetime
    completed_tasks: int
