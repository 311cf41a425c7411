from datetime import datetime
from libs.result import Result, Error, ErrorCode, Return
from src.app.services.cache_invalidator import CacheInvalidator
from src.app.services.unit_of_work import UnitOfWork
from .dtos import TaskDTO, UpdateTaskCommand

UPDATABLE_FIELDS = ("title", "description", "status", "priority", "assigned_to", "due_date")


class UpdateTaskUseCase:
    """Use case for partially updating a task"""

    def __init__(self, uow: UnitOfWork, invalidator: CacheInvalidator):
        self.uow = uow
        self.invalidator = invalidator

    async def execute(self, command: UpdateTaskCommand) -> Result[TaskDTO]:
        changes = command.model_dump(include=set(UPDATABLE_FIELDS), exclude_unset=True)

        if "title" in changes:
            if changes["title"] is None or len(changes["title"].strip()) == 0:
                return Return.err(Error(code=ErrorCode.VALIDATION_ERROR, message="Task title cannot be empty"))
            changes["title"] = changes["title"].strip()

        for field in ("status", "priority"):
            if field in changes and changes[field] is None:
                return Return.err(Error(code=ErrorCode.VALIDATION_ERROR, message=f"Task {field} cannot be null"))

        async with self.uow:
            task = await self.uow.tasks.get_by_id(command.task_id)
            if task is None:
                return Return.err(Error(code=ErrorCode.NOT_FOUND, message="Task not found"))

            project = await self.uow.projects.get_by_id(task.project_id)
            if project is None or not project.is_owned_by(command.user_id):
                return Return.err(
                    Error(code=ErrorCode.AUTHORIZATION_ERROR, message="You do not have access to this task")
                )

            if changes.get("assigned_to"):
                assignee = await self.uow.users.get_by_id(changes["assigned_to"])
                if assignee is None:
                    return Return.err(
                        Error(code=ErrorCode.VALIDATION_ERROR, message="Assigned user does not exist")
                    )

            for field, value in changes.items():
                setattr(task, field, value)
            task.updated_at = datetime.utcnow()

            updated_task = await self.uow.tasks.update(task)
            assignees = await self.uow.users.get_by_ids(
                [updated_task.assigned_to] if updated_task.assigned_to else []
            )
            await self.uow.commit()

        await self.invalidator.task_changed(project.owner_id, project.id)

        return Return.ok(TaskDTO.from_entity(updated_task, assignees))
