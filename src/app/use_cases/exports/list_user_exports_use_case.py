from typing import List
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ExportStatusDTO


class ListUserExportsUseCase:
    """Use case for listing a user's exports, newest first"""

    def __init__(self, uow: UnitOfWork, download_base: str = "/api/exports"):
        self.uow = uow
        self.download_base = download_base

    async def execute(self, user_id: str) -> Result[List[ExportStatusDTO]]:
        async with self.uow:
            rows = await self.uow.exports.list_by_user(user_id)
            return Return.ok([
                ExportStatusDTO.from_row(export, project_name, self.download_base) for export, project_name in rows
            ])
