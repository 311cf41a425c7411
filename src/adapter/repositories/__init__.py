from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.repositories.project_repository import SqlAlchemyProjectRepository
from src.adapter.repositories.task_repository import SqlAlchemyTaskRepository
from src.adapter.repositories.export_repository import SqlAlchemyExportRepository

__all__ = [
    "SqlAlchemyUserRepository",
    "SqlAlchemyProjectRepository",
    "SqlAlchemyTaskRepository",
    "SqlAlchemyExportRepository",
]
