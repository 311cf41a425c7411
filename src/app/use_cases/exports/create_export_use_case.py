"""Create Export Use Case

Records a new PENDING export for a project owned by the requesting user.
"""
from libs.result import Result, Error, ErrorCode, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.export import Export
from .dtos import ExportDTO


class CreateExportUseCase:
    """
    Use case: Create Export

    Verifies ownership and persists the export row. Dispatching the
    export for processing is the caller's next step, after this commit.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, project_id: str, user_id: str) -> Result[ExportDTO]:
        """
        Create a new export record for a project

        Args:
            project_id: The project ID to export
            user_id: The requesting user

        Returns:
            Result[ExportDTO]: The PENDING export
        """
        async with self.uow:
            # Verify project exists and belongs to the user
            project = await self.uow.projects.get_by_id(project_id)
            if not project:
                return Return.err(Error(
                    code=ErrorCode.NOT_FOUND,
                    message="Project not found"
                ))

            if not project.is_owned_by(user_id):
                return Return.err(Error(
                    code=ErrorCode.AUTHORIZATION_ERROR,
                    message="You do not have access to this project"
                ))

            export = Export(project_id=project_id, user_id=user_id)
            export = await self.uow.exports.create(export)
            await self.uow.commit()

            return Return.ok(ExportDTO.from_entity(export))
