from abc import ABC, abstractmethod
from src.app.repositories import (
    IExportRepository,
    ProjectRepository,
    TaskRepository,
    UserRepository,
)


class UnitOfWork(ABC):
    """
    Transaction boundary over the persistent store.

    Repositories are available as attributes while the unit of work is
    entered; leaving it rolls back anything that was not committed.
    """

    users: UserRepository
    projects: ProjectRepository
    tasks: TaskRepository
    exports: IExportRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
