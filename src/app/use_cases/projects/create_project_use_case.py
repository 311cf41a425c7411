import logging
from libs.result import Result, Error, ErrorCode, Return
from src.app.services.cache_invalidator import CacheInvalidator
from src.app.services.unit_of_work import UnitOfWork
from src.domain import Project
from .dtos import CreateProjectCommand, ProjectDTO

logger = logging.getLogger(__name__)


class CreateProjectUseCase:
    """Use case for creating a new project"""

    def __init__(self, uow: UnitOfWork, invalidator: CacheInvalidator):
        self.uow = uow
        self.invalidator = invalidator

    async def execute(self, command: CreateProjectCommand) -> Result[ProjectDTO]:
        """
        Execute the create project use case

        Returns:
            Result[ProjectDTO]: Success with project data or error
        """
        # Validation
        if not command.name or len(command.name.strip()) == 0:
            return Return.err(Error(code=ErrorCode.VALIDATION_ERROR, message="Project name cannot be empty"))

        async with self.uow:
            project = Project(
                owner_id=command.owner_id,
                name=command.name.strip(),
                description=command.description,
            )

            created_project = await self.uow.projects.create(project)
            await self.uow.commit()

        await self.invalidator.project_created(command.owner_id)
        logger.info(f"Project {created_project.id} created by {command.owner_id}")

        return Return.ok(ProjectDTO.from_entity(created_project))
