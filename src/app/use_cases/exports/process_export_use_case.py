"""Process Export Use Case

Runs one export: claims it, generates the JSON report of the project and
stores it as the export's artifact.
"""
import logging
from datetime import datetime
from libs.result import Result, Error, ErrorCode, Return
from src.domain.enums import ExportStatus
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.file_storage import FileStorage
from src.app.services.export_report import (
    build_export_report,
    export_filename,
    serialize_report,
)
from .dtos import ExportDTO

logger = logging.getLogger(__name__)


class ExportProjectMissing(Exception):
    """The project of an export disappeared before the report was built"""


class ProcessExportUseCase:
    """
    Use case: Process Export

    1. Claim the export (PENDING -> PROCESSING). Only one run can win the
       claim; every other run returns EXPORT_ALREADY_CLAIMED untouched.
       A store error before the claim is the only retryable error.
    2. Load the project, its tasks and their assignees
    3. Build and serialize the report, write it to file storage
    4. Mark the export COMPLETED, or FAILED on any error
    """

    def __init__(self, uow: UnitOfWork, file_storage: FileStorage, clock=datetime.utcnow):
        self.uow = uow
        self.file_storage = file_storage
        self.clock = clock

    async def execute(self, export_id: str, project_id: str) -> Result[ExportDTO]:
        """
        Process an export

        Args:
            export_id: The export to run
            project_id: The project to export

        Returns:
            Result[ExportDTO]: The COMPLETED export, or the error that made it fail
        """
        try:
            async with self.uow:
                export = await self.uow.exports.get_by_id(export_id)
                if not export:
                    return Return.err(Error(
                        code=ErrorCode.NOT_FOUND,
                        message="Export not found"
                    ))

                claimed = await self.uow.exports.claim(export_id)
                if claimed is None:
                    return Return.err(Error(
                        code=ErrorCode.EXPORT_ALREADY_CLAIMED,
                        message=f"Export is {ExportStatus(export.status).value}, expected PENDING",
                    ))
                await self.uow.commit()
        except Exception as e:
            # Nothing was written, the export is still PENDING
            logger.error(f"Could not claim export {export_id}: {e}")
            return Return.err(Error(
                code=ErrorCode.INTERNAL_ERROR,
                message="Export could not be claimed",
                reason=str(e) or type(e).__name__,
                retryable=True,
            ))

        logger.info(f"Starting export {export_id} for project {project_id}")

        # Generate outside of the claim transaction to keep it short
        try:
            file_path = await self._generate(project_id)

            async with self.uow:
                export = await self.uow.exports.get_by_id(export_id)
                export.complete(file_path)
                export = await self.uow.exports.update(export)
                await self.uow.commit()

            logger.info(f"Export {export_id} completed: {file_path}")
            return Return.ok(ExportDTO.from_entity(export))

        except Exception as e:
            logger.error(f"Export {export_id} failed for project {project_id}: {e}")
            await self._mark_failed(export_id, str(e) or type(e).__name__)

            if isinstance(e, ExportProjectMissing):
                return Return.err(Error(code=ErrorCode.NOT_FOUND, message=str(e)))
            return Return.err(Error(
                code=ErrorCode.EXPORT_FAILED,
                message="Export generation failed",
                reason=str(e),
            ))

    async def _generate(self, project_id: str) -> str:
        """Write the report artifact and return its storage path"""
        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                raise ExportProjectMissing("Project not found")

            tasks = await self.uow.tasks.find_by_project_id(project_id, newest_first=False)
            assignees = await self.uow.users.get_by_ids(
                task.assigned_to for task in tasks if task.assigned_to
            )
            report = build_export_report(project, tasks, assignees)

        file_path = export_filename(project_id, self.clock())
        await self.file_storage.upload(file_path, serialize_report(report))
        return file_path

    async def _mark_failed(self, export_id: str, error_message: str) -> None:
        async with self.uow:
            export = await self.uow.exports.get_by_id(export_id)
            if export is None:
                # Removed together with its project
                return
            export.fail(error_message)
            await self.uow.exports.update(export)
            await self.uow.commit()
