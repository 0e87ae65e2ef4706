"""
Application layer DTOs.
Data Transfer Objects for API requests and responses.
"""

from .base_dto import *
from .user_dto import *
from .category_dto import *
from .task_dto import *
from .collaboration_dto import *
from .report_dto import *

__all__ = [
    # Base DTOs
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "CreateRequestDTO",
    "UpdateRequestDTO",
    "MessageResponseDTO",
    "HealthCheckResponseDTO",
    "ErrorResponseDTO",

    # User DTOs
    "RegisterRequestDTO",
    "LoginRequestDTO",
    "UpdateUserRequestDTO",
    "UserResponseDTO",
    "AuthTokenResponseDTO",

    # Category DTOs
    "CreateCategoryRequestDTO",
    "UpdateCategoryRequestDTO",
    "CategoryResponseDTO",

    # Task DTOs
    "CreateTaskRequestDTO",
    "UpdateTaskRequestDTO",
    "TaskResponseDTO",

    # Collaboration DTOs
    "AddCollaboratorRequestDTO",
    "CollaborationResponseDTO",
    "PermissionResponseDTO",

    # Report DTOs
    "CategoryBreakdownDTO",
    "UserTaskReportDTO",
    "TeamMemberReportDTO",
    "TeamReportRequestDTO",
    "CompletedTasksReportDTO",
]
