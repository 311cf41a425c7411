from libs.result import Result, Error, ErrorCode, Return
from src.app.services.cache_invalidator import CacheInvalidator
from src.app.services.unit_of_work import UnitOfWork
from .dtos import DeleteTaskResponse


class DeleteTaskUseCase:
    """Use case for deleting a task"""

    def __init__(self, uow: UnitOfWork, invalidator: CacheInvalidator):
        self.uow = uow
        self.invalidator = invalidator

    async def execute(self, task_id: str, user_id: str) -> Result[DeleteTaskResponse]:
        async with self.uow:
            task = await self.uow.tasks.get_by_id(task_id)
            if task is None:
                return Return.err(Error(code=ErrorCode.NOT_FOUND, message="Task not found"))

            project = await self.uow.projects.get_by_id(task.project_id)
            if project is None or not project.is_owned_by(user_id):
                return Return.err(
                    Error(code=ErrorCode.AUTHORIZATION_ERROR, message="You do not have access to this task")
                )

            await self.uow.tasks.delete(task)
            await self.uow.commit()

        await self.invalidator.task_changed(project.owner_id, project.id)

        return Return.ok(DeleteTaskResponse(id=task_id))
