from src.domain.base import BaseModel, generate_uuid
from src.domain.enums import TaskStatus, TaskPriority, ExportStatus
from src.domain.user import User
from src.domain.project import Project
from src.domain.task import Task
from src.domain.export import Export, InvalidExportTransition

__all__ = [
    # Base
    "BaseModel",
    "generate_uuid",
    # Enums
    "TaskStatus",
    "TaskPriority",
    "ExportStatus",
    # Entities
    "User",
    "Project",
    "Task",
    "Export",
    "InvalidExportTransition",
]
