"""
Collaboration router.
Grants, revokes and inspects roles on tasks.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, status

from taskflow.application.dto.collaboration_dto import (
    AddCollaboratorRequestDTO,
    CollaborationResponseDTO,
    PermissionResponseDTO,
)
from taskflow.application.services.collaboration_service import CollaborationService
from taskflow.infrastructure.auth.dependencies import CurrentUserId
from taskflow.infrastructure.container import ServiceContainer, get_container


router = APIRouter()


def get_collaboration_service(
    container: Annotated[ServiceContainer, Depends(get_container)]
) -> CollaborationService:
    """Dependency to get the collaboration service."""
    return container.collaboration_service


CollaborationServiceDep = Annotated[CollaborationService, Depends(get_collaboration_service)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CollaborationResponseDTO)
async def add_collaborator(
    request: AddCollaboratorRequestDTO,
    user_id: CurrentUserId,
    collaboration_service: CollaborationServiceDep
):
    """
    Grant a role on a task. Only task owners may do this.

    - **task_id**: Task ID
    - **user_id**: User receiving the grant
    - **role**: OWNER, COLLABORATOR or VIEWER (default VIEWER)
    """
    collaboration = await collaboration_service.add_collaborator(request, user_id)
    return CollaborationResponseDTO.from_domain(collaboration)


@router.get("/task/{task_id}", response_model=List[CollaborationResponseDTO])
async def list_task_collaborators(
    task_id: str,
    user_id: CurrentUserId,
    collaboration_service: CollaborationServiceDep
):
    """List the collaboration rows of a task."""
    collaborations = await collaboration_service.list_task_collaborators(task_id, user_id)
    return [CollaborationResponseDTO.from_domain(c) for c in collaborations]


@router.get("/me", response_model=List[CollaborationResponseDTO])
async def list_my_collaborations(
    user_id: CurrentUserId,
    collaboration_service: CollaborationServiceDep
):
    """List the collaboration rows held by the authenticated user."""
    collaborations = await collaboration_service.list_user_collaborations(user_id)
    return [CollaborationResponseDTO.from_domain(c) for c in collaborations]


@router.delete("/task/{task_id}/user/{target_user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_collaborator(
    task_id: str,
    target_user_id: str,
    user_id: CurrentUserId,
    collaboration_service: CollaborationServiceDep
):
    """Revoke a user's role on a task. Only task owners may do this."""
    await collaboration_service.remove_collaborator(task_id, target_user_id, user_id)


@router.get("/task/{task_id}/permission", response_model=PermissionResponseDTO)
async def check_permission(
    task_id: str,
    user_id: CurrentUserId,
    collaboration_service: CollaborationServiceDep
):
    """Effective permission of the authenticated user on a task."""
    level = await collaboration_service.check_permission(task_id, user_id)
    return PermissionResponseDTO(task_id=task_id, user_id=user_id, role=level)
