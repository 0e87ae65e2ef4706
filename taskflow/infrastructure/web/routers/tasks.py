"""
Task management router.
Handles CRUD operations for task resources.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, status

from taskflow.application.dto.task_dto import (
    CreateTaskRequestDTO,
    TaskResponseDTO,
    UpdateTaskRequestDTO,
)
from taskflow.application.services.task_service import TaskService
from taskflow.domain.models.task import TaskStatus
from taskflow.infrastructure.auth.dependencies import CurrentUserId
from taskflow.infrastructure.container import ServiceContainer, get_container


router = APIRouter()


def get_task_service(
    container: Annotated[ServiceContainer, Depends(get_container)]
) -> TaskService:
    """Dependency to get the task service."""
    return container.task_service


TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TaskResponseDTO)
async def create_task(
    request: CreateTaskRequestDTO,
    user_id: CurrentUserId,
    task_service: TaskServiceDep
):
    """
    Create a new task owned by the authenticated user.

    - **title**: Task title, unique within its category (required)
    - **description**: Task description
    - **priority**: LOW, MEDIUM or HIGH
    - **due_date**: Due date for the task
    - **category_id**: Category ID
    - **assigned_user_id**: User ID to assign the task to (required)
    """
    task = await task_service.create_task(request, user_id)
    return TaskResponseDTO.from_domain(task)


@router.get("", response_model=List[TaskResponseDTO])
async def list_my_tasks(user_id: CurrentUserId, task_service: TaskServiceDep):
    """List tasks the authenticated user created or is assigned to."""
    tasks = await task_service.list_user_tasks(user_id)
    return [TaskResponseDTO.from_domain(task) for task in tasks]


@router.get("/assigned", response_model=List[TaskResponseDTO])
async def list_assigned_tasks(user_id: CurrentUserId, task_service: TaskServiceDep):
    """List tasks assigned to the authenticated user."""
    tasks = await task_service.list_assigned_tasks(user_id)
    return [TaskResponseDTO.from_domain(task) for task in tasks]


@router.get("/category/{category_id}", response_model=List[TaskResponseDTO])
async def list_tasks_by_category(
    category_id: str,
    user_id: CurrentUserId,
    task_service: TaskServiceDep
):
    """List tasks in a category the authenticated user can see."""
    tasks = await task_service.list_tasks_by_category(category_id, user_id)
    return [TaskResponseDTO.from_domain(task) for task in tasks]


@router.get("/status/{task_status}", response_model=List[TaskResponseDTO])
async def list_tasks_by_status(
    task_status: TaskStatus,
    user_id: CurrentUserId,
    task_service: TaskServiceDep
):
    """List tasks with a status the authenticated user can see."""
    tasks = await task_service.list_tasks_by_status(task_status, user_id)
    return [TaskResponseDTO.from_domain(task) for task in tasks]


@router.get("/{task_id}", response_model=TaskResponseDTO)
async def get_task(task_id: str, user_id: CurrentUserId, task_service: TaskServiceDep):
    """Get a task the authenticated user has any permission on."""
    task = await task_service.get_task(task_id, user_id)
    return TaskResponseDTO.from_domain(task)


@router.put("/{task_id}", response_model=TaskResponseDTO)
async def update_task(
    task_id: str,
    request: UpdateTaskRequestDTO,
    user_id: CurrentUserId,
    task_service: TaskServiceDep
):
    """Update a task. Requires OWNER or COLLABORATOR permission."""
    task = await task_service.update_task(task_id, request, user_id)
    return TaskResponseDTO.from_domain(task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: str, user_id: CurrentUserId, task_service: TaskServiceDep):
    """Delete a task and its collaborations. Requires OWNER permission."""
    await task_service.delete_task(task_id, user_id)
