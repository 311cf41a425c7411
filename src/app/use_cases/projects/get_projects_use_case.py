from libs.result import Result, Return
from src.app.services.cache import Cache
from src.app.services.cache_keys import CacheKeys, CacheTTL
from src.app.services.unit_of_work import UnitOfWork
from .cached_reads import read_cached, store_cached
from .dtos import GetProjectsResponse, ProjectDTO


class GetProjectsUseCase:
    """Use case for getting all projects of a user"""

    def __init__(self, uow: UnitOfWork, cache: Cache, ttl_seconds: int = CacheTTL.USER_PROJECTS):
        self.uow = uow
        self.cache = cache
        self.ttl_seconds = ttl_seconds

    async def execute(self, user_id: str) -> Result[GetProjectsResponse]:
        """
        Execute the get projects use case

        Args:
            user_id: Owner of the projects

        Returns:
            Result[GetProjectsResponse]: Projects with task counts, newest first
        """
        key = CacheKeys.user_projects(user_id)
        lookup, cached = await read_cached(self.cache, key, GetProjectsResponse)
        if cached is not None:
            return Return.ok(cached)

        async with self.uow:
            projects = await self.uow.projects.get_by_owner_id(user_id)
            task_counts = await self.uow.projects.count_tasks([project.id for project in projects])

            response = GetProjectsResponse(
                projects=[
                    ProjectDTO.from_entity(project, task_counts.get(project.id, 0))
                    for project in projects
                ]
            )

        await store_cached(self.cache, lookup, key, response, self.ttl_seconds)
        return Return.ok(response)
