"""
Report router.
Task statistics for the authenticated user and for teams.
"""

from datetime import datetime
from typing import Annotated, List

from fastapi import APIRouter, Depends, Query

from taskflow.application.dto.report_dto import (
    CompletedTasksReportDTO,
    TeamMemberReportDTO,
    TeamReportRequestDTO,
    UserTaskReportDTO,
)
from taskflow.application.services.report_service import ReportService
from taskflow.infrastructure.auth.dependencies import CurrentUserId
from taskflow.infrastructure.container import ServiceContainer, get_container


router = APIRouter()


def get_report_service(
    container: Annotated[ServiceContainer, Depends(get_container)]
) -> ReportService:
    """Dependency to get the report service."""
    return container.report_service


ReportServiceDep = Annotated[ReportService, Depends(get_report_service)]


@router.get("/user", response_model=UserTaskReportDTO)
async def get_user_report(user_id: CurrentUserId, report_service: ReportServiceDep):
    """Status histogram, category breakdown, overdue and monthly completion counts."""
    return await report_service.get_user_report(user_id)


@router.post("/team", response_model=List[TeamMemberReportDTO])
async def get_team_report(
    request: TeamReportRequestDTO,
    user_id: CurrentUserId,
    report_service: ReportServiceDep
):
    """Per-member assigned, completed and overdue counts, in request order."""
    return await report_service.get_team_report(request.user_ids)


@router.get("/completed-tasks", response_model=CompletedTasksReportDTO)
async def get_completed_tasks_in_period(
    user_id: CurrentUserId,
    report_service: ReportServiceDep,
    start_date: datetime = Query(..., description="Period start (ISO-8601, inclusive)"),
    end_date: datetime = Query(..., description="Period end (ISO-8601, inclusive)")
):
    """Number of the user's tasks completed within the period."""
    return await report_service.get_completed_tasks_in_period(user_id, start_date, end_date)
