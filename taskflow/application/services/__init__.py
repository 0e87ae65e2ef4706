from .task_service import TaskService
from .collaboration_service import CollaborationService
from .category_service import CategoryService
from .report_service import ReportService
from .user_service import UserService

__all__ = [
    "TaskService",
    "CollaborationService",
    "CategoryService",
    "ReportService",
    "UserService",
]
