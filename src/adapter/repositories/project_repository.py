from typing import Dict, List, Optional
from sqlalchemy import delete, func
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from src.app.repositories import ProjectRepository
from src.domain import Export, Project, Task


class SqlAlchemyProjectRepository(ProjectRepository):
    """SQLAlchemy implementation of ProjectRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, project: Project) -> Project:
        """Create a new project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def get_by_id(self, project_id: str) -> Optional[Project]:
        """Get project by ID"""
        statement = select(Project).where(Project.id == project_id)
        result = await self.session.exec(statement)
        return result.first()

    async def get_by_owner_id(self, owner_id: str) -> List[Project]:
        """Get all projects of an owner, newest first"""
        statement = (
            select(Project)
            .where(Project.owner_id == owner_id)
            .order_by(Project.created_at.desc())
        )
        result = await self.session.exec(statement)
        return list(result.all())

    async def count_tasks(self, project_ids: List[str]) -> Dict[str, int]:
        """Count tasks per project"""
        if not project_ids:
            return {}
        statement = (
            select(Task.project_id, func.count(Task.id))
            .where(Task.project_id.in_(project_ids))
            .group_by(Task.project_id)
        )
        result = await self.session.exec(statement)
        counts = {project_id: 0 for project_id in project_ids}
        for project_id, count in result.all():
            counts[project_id] = count
        return counts

    async def update(self, project: Project) -> Project:
        """Update an existing project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def delete(self, project: Project) -> None:
        """Delete a project together with its tasks and exports"""
        # Explicit so the cascade also holds on backends without FK enforcement
        await self.session.execute(delete(Export).where(Export.project_id == project.id))
        await self.session.execute(delete(Task).where(Task.project_id == project.id))
        await self.session.delete(project)
        await self.session.flush()
