from libs.result import Result, Error, ErrorCode, Return
from src.app.services.cache import Cache
from src.app.services.cache_keys import CacheKeys, CacheTTL
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks.dtos import TaskDTO
from .cached_reads import read_cached, store_cached
from .dtos import ProjectDetailDTO


class GetProjectByIdUseCase:
    """Use case for getting a single project with its tasks"""

    def __init__(self, uow: UnitOfWork, cache: Cache, ttl_seconds: int = CacheTTL.PROJECT_DETAIL):
        self.uow = uow
        self.cache = cache
        self.ttl_seconds = ttl_seconds

    async def execute(self, project_id: str, user_id: str) -> Result[ProjectDetailDTO]:
        """
        Execute the get project by ID use case

        Args:
            project_id: ID of the project to retrieve
            user_id: Requesting user (must own the project)

        Returns:
            Result[ProjectDetailDTO]: Success with project data or error
        """
        key = CacheKeys.project_detail(project_id)
        lookup, cached = await read_cached(self.cache, key, ProjectDetailDTO)
        if cached is not None:
            # A cached entry is shared by every requester; ownership is checked on each read
            if cached.owner_id != str(user_id):
                return Return.err(
                    Error(code=ErrorCode.AUTHORIZATION_ERROR, message="You do not have access to this project")
                )
            return Return.ok(cached)

        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)

            if project is None:
                return Return.err(Error(code=ErrorCode.NOT_FOUND, message="Project not found"))

            if not project.is_owned_by(user_id):
                return Return.err(
                    Error(code=ErrorCode.AUTHORIZATION_ERROR, message="You do not have access to this project")
                )

            tasks = await self.uow.tasks.find_by_project_id(project_id)
            assignees = await self.uow.users.get_by_ids(
                task.assigned_to for task in tasks if task.assigned_to
            )

            detail = ProjectDetailDTO(
                **ProjectDetailDTO.from_entity(project, len(tasks)).model_dump(exclude={"tasks"}),
                tasks=[TaskDTO.from_entity(task, assignees) for task in tasks],
            )

        await store_cached(self.cache, lookup, key, detail, self.ttl_seconds)
        return Return.ok(detail)
