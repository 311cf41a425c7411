from datetime import datetime
from typing import List, Optional, Tuple
from sqlalchemy import update
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from src.app.repositories.export_repository import IExportRepository
from src.domain.export import Export
from src.domain.enums import ExportStatus
from src.domain.project import Project


class SqlAlchemyExportRepository(IExportRepository):
    """SQLAlchemy implementation of Export repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, export: Export) -> Export:
        """Create a new export in PENDING state"""
        self.session.add(export)
        await self.session.flush()
        await self.session.refresh(export)
        return export

    async def get_by_id(self, export_id: str) -> Optional[Export]:
        """Get export by ID, bypassing any stale session state"""
        stmt = (
            select(Export)
            .where(Export.id == export_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_with_project_name(self, export_id: str) -> Optional[Tuple[Export, str]]:
        """Get export by ID joined with its project name"""
        stmt = (
            select(Export, Project.name)
            .join(Project, Project.id == Export.project_id)
            .where(Export.id == export_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        row = result.first()
        if row is None:
            return None
        export, project_name = row
        return export, project_name

    async def list_by_user(self, user_id: str) -> List[Tuple[Export, str]]:
        """Get all exports of a user with project names, newest first"""
        stmt = (
            select(Export, Project.name)
            .join(Project, Project.id == Export.project_id)
            .where(Export.user_id == user_id)
            .order_by(Export.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return [(export, project_name) for export, project_name in result.all()]

    async def claim(self, export_id: str) -> Optional[Export]:
        """Conditionally move a PENDING export to PROCESSING"""
        stmt = (
            update(Export)
            .where(Export.id == export_id, Export.status == ExportStatus.PENDING)
            .values(status=ExportStatus.PROCESSING, started_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            return None
        return await self.get_by_id(export_id)

    async def update(self, export: Export) -> Export:
        """Update an existing export"""
        self.session.add(export)
        await self.session.flush()
        await self.session.refresh(export)
        return export

    async def find_stale(
        self, status: ExportStatus, older_than: datetime, limit: int = 50
    ) -> List[Export]:
        """Get exports that have stayed in a status since before a cutoff"""
        since = Export.started_at if status == ExportStatus.PROCESSING else Export.created_at
        stmt = (
            select(Export)
            .where(Export.status == status, since < older_than)
            .order_by(since.asc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
