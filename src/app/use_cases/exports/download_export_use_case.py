"""Download Export Use Case

Returns the artifact of a completed export.
"""
import logging
from libs.result import Result, Error, ErrorCode, Return
from src.app.services.file_storage import FileStorage
from src.app.services.unit_of_work import UnitOfWork
from src.domain.enums import ExportStatus
from .dtos import ExportDownloadDTO
from .get_export_status_use_case import GetExportStatusUseCase

logger = logging.getLogger(__name__)


class DownloadExportUseCase:
    def __init__(self, uow: UnitOfWork, file_storage: FileStorage):
        self.uow = uow
        self.file_storage = file_storage

    async def execute(self, export_id: str, user_id: str) -> Result[ExportDownloadDTO]:
        status_result = await GetExportStatusUseCase(self.uow).execute(export_id, user_id)
        if status_result.is_err():
            return status_result

        export = status_result.value
        if export.status != ExportStatus.COMPLETED or not export.file_path:
            return Return.err(Error(
                code=ErrorCode.EXPORT_NOT_READY,
                message="Export is not ready for download yet"
            ))

        try:
            content = await self.file_storage.read(export.file_path)
        except FileNotFoundError:
            logger.error(f"Artifact {export.file_path} of export {export_id} is missing")
            return Return.err(Error(
                code=ErrorCode.NOT_FOUND,
                message="Export file not found"
            ))

        return Return.ok(ExportDownloadDTO(filename=export.file_path, content=content))
