import logging
from libs.result import Result, Error, ErrorCode, Return
from src.app.services.cache_invalidator import CacheInvalidator
from src.app.services.unit_of_work import UnitOfWork
from src.domain import Task
from .dtos import CreateTaskCommand, TaskDTO

logger = logging.getLogger(__name__)


class CreateTaskUseCase:
    """Use case for creating a new task"""

    def __init__(self, uow: UnitOfWork, invalidator: CacheInvalidator):
        self.uow = uow
        self.invalidator = invalidator

    async def execute(self, command: CreateTaskCommand) -> Result[TaskDTO]:
        """
        Execute the create task use case

        Returns:
            Result[TaskDTO]: Success with task data or error
        """
        if not command.title or len(command.title.strip()) == 0:
            return Return.err(Error(code=ErrorCode.VALIDATION_ERROR, message="Task title cannot be empty"))

        async with self.uow:
            # Verify project exists and belongs to the caller
            project = await self.uow.projects.get_by_id(command.project_id)
            if project is None:
                return Return.err(
                    Error(code=ErrorCode.NOT_FOUND, message=f"Project {command.project_id} not found")
                )

            if not project.is_owned_by(command.user_id):
                return Return.err(
                    Error(code=ErrorCode.AUTHORIZATION_ERROR, message="You do not have access to this project")
                )

            assignees = {}
            if command.assigned_to:
                assignee = await self.uow.users.get_by_id(command.assigned_to)
                if assignee is None:
                    return Return.err(
                        Error(code=ErrorCode.VALIDATION_ERROR, message="Assigned user does not exist")
                    )
                assignees[assignee.id] = assignee

            task = Task(
                project_id=command.project_id,
                title=command.title.strip(),
                description=command.description,
                status=command.status,
                priority=command.priority,
                assigned_to=command.assigned_to,
                due_date=command.due_date,
            )

            created_task = await self.uow.tasks.create(task)
            await self.uow.commit()

        await self.invalidator.task_changed(project.owner_id, project.id)
        logger.info(f"Task {created_task.id} created in project {project.id}")

        return Return.ok(TaskDTO.from_entity(created_task, assignees))
