import logging
from libs.result import Result, Error, ErrorCode, Return
from src.app.services.cache_invalidator import CacheInvalidator
from src.app.services.unit_of_work import UnitOfWork
from .dtos import DeleteProjectResponse

logger = logging.getLogger(__name__)


class DeleteProjectUseCase:
    """Use case for deleting a project with its tasks and exports"""

    def __init__(self, uow: UnitOfWork, invalidator: CacheInvalidator):
        self.uow = uow
        self.invalidator = invalidator

    async def execute(self, project_id: str, user_id: str) -> Result[DeleteProjectResponse]:
        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)

            if project is None:
                return Return.err(Error(code=ErrorCode.NOT_FOUND, message="Project not found"))

            if not project.is_owned_by(user_id):
                return Return.err(
                    Error(code=ErrorCode.AUTHORIZATION_ERROR, message="You do not have access to this project")
                )

            owner_id = project.owner_id
            await self.uow.projects.delete(project)
            await self.uow.commit()

        await self.invalidator.project_deleted(owner_id, project_id)
        logger.info(f"Project {project_id} deleted by {user_id}")

        return Return.ok(DeleteProjectResponse(id=project_id))
