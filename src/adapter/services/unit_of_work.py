from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.repositories.project_repository import SqlAlchemyProjectRepository
from src.adapter.repositories.task_repository import SqlAlchemyTaskRepository
from src.adapter.repositories.export_repository import SqlAlchemyExportRepository


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = SqlAlchemyUserRepository(self.session)
        self.projects = SqlAlchemyProjectRepository(self.session)
        self.tasks = SqlAlchemyTaskRepository(self.session)
        self.exports = SqlAlchemyExportRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
