from datetime import datetime
from libs.result import Result, Error, ErrorCode, Return
from src.app.services.cache_invalidator import CacheInvalidator
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ProjectDTO, UpdateProjectCommand


class UpdateProjectUseCase:
    """Use case for updating an existing project"""

    def __init__(self, uow: UnitOfWork, invalidator: CacheInvalidator):
        self.uow = uow
        self.invalidator = invalidator

    async def execute(self, command: UpdateProjectCommand) -> Result[ProjectDTO]:
        """
        Execute the update project use case

        Returns:
            Result[ProjectDTO]: Success with updated project data or error
        """
        async with self.uow:
            project = await self.uow.projects.get_by_id(command.project_id)

            if project is None:
                return Return.err(
                    Error(code=ErrorCode.NOT_FOUND, message=f"Project {command.project_id} not found")
                )

            if not project.is_owned_by(command.user_id):
                return Return.err(
                    Error(code=ErrorCode.AUTHORIZATION_ERROR, message="You do not have access to this project")
                )

            # Update fields if provided
            if command.name is not None:
                if len(command.name.strip()) == 0:
                    return Return.err(
                        Error(code=ErrorCode.VALIDATION_ERROR, message="Project name cannot be empty")
                    )
                project.name = command.name.strip()

            if command.description is not None:
                project.description = command.description

            project.updated_at = datetime.utcnow()

            updated_project = await self.uow.projects.update(project)
            task_counts = await self.uow.projects.count_tasks([updated_project.id])
            await self.uow.commit()

        await self.invalidator.project_updated(updated_project.owner_id, updated_project.id)

        return Return.ok(
            ProjectDTO.from_entity(updated_project, task_counts.get(updated_project.id, 0))
        )
