"""Get Export Status Use Case

Retrieves one export of the requesting user, with its project name.
"""
from libs.result import Result, Error, ErrorCode, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ExportStatusDTO


class GetExportStatusUseCase:
    """
    Use case: Get Export Status

    Returns the current state of an export. Only the user who requested
    the export may read it.
    """

    def __init__(self, uow: UnitOfWork, download_base: str = "/api/exports"):
        self.uow = uow
        self.download_base = download_base

    async def execute(self, export_id: str, user_id: str) -> Result[ExportStatusDTO]:
        async with self.uow:
            row = await self.uow.exports.get_with_project_name(export_id)
            if not row:
                return Return.err(Error(
                    code=ErrorCode.NOT_FOUND,
                    message="Export not found"
                ))

            export, project_name = row
            if str(export.user_id) != str(user_id):
                return Return.err(Error(
                    code=ErrorCode.AUTHORIZATION_ERROR,
                    message="You do not have access to this export"
                ))

            return Return.ok(ExportStatusDTO.from_row(export, project_name, self.download_base))
