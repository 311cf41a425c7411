from typing import Optional, List
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from src.app.repositories import TaskRepository
from src.domain import Task


class SqlAlchemyTaskRepository(TaskRepository):
    """SQLAlchemy implementation of TaskRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, task: Task) -> Task:
        """Create a new task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        """Get task by ID"""
        statement = select(Task).where(Task.id == task_id)
        result = await self.session.exec(statement)
        return result.first()

    async def find_by_project_id(self, project_id: str, newest_first: bool = True) -> List[Task]:
        """Find all tasks for a project ordered by creation time"""
        order = Task.created_at.desc() if newest_first else Task.created_at.asc()
        statement = select(Task).where(Task.project_id == project_id).order_by(order)
        result = await self.session.exec(statement)
        return list(result.all())

    async def update(self, task: Task) -> Task:
        """Update an existing task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def delete(self, task: Task) -> None:
        """Delete a task"""
        await self.session.delete(task)
        await self.session.flush()
