from src.app.repositories.user_repository import UserRepository
from src.app.repositories.project_repository import ProjectRepository
from src.app.repositories.task_repository import TaskRepository
from src.app.repositories.export_repository import IExportRepository

__all__ = [
    "UserRepository",
    "ProjectRepository",
    "TaskRepository",
    "IExportRepository",
]
