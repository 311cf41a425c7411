"""
Unit tests for cached project reads
"""
import pytest
from unittest.mock import AsyncMock
from libs.result import ErrorCode
from src.app.services.cache import CacheLookup
from src.app.use_cases.projects import (
    GetProjectByIdUseCase,
    GetProjectsResponse,
    GetProjectsUseCase,
    ProjectDTO,
)


@pytest.fixture
def owned_projects(mock_uow, sample_project):
    mock_uow.projects.get_by_owner_id = AsyncMock(return_value=[sample_project])
    mock_uow.projects.count_tasks = AsyncMock(return_value={sample_project.id: 2})
    return [sample_project]


@pytest.fixture
def project_with_tasks(mock_uow, sample_project, sample_tasks, owner):
    mock_uow.projects.get_by_id = AsyncMock(return_value=sample_project)
    mock_uow.tasks.find_by_project_id = AsyncMock(return_value=list(reversed(sample_tasks)))
    mock_uow.users.get_by_ids = AsyncMock(return_value={owner.id: owner})
    return sample_project


class TestGetProjects:
    async def test_miss_reads_store_and_populates_cache(self, mock_uow, mock_cache, owned_projects):
        result = await GetProjectsUseCase(mock_uow, mock_cache, ttl_seconds=300).execute("user-1")

        assert result.is_ok()
        assert result.value.projects[0].task_count == 2
        key, payload, ttl = mock_cache.set.call_args.args
        assert key == "projects:user:user-1"
        assert ttl == 300
        assert GetProjectsResponse.model_validate_json(payload) == result.value

    async def test_hit_skips_store(self, mock_uow, mock_cache, sample_project):
        cached = GetProjectsResponse(projects=[ProjectDTO.from_entity(sample_project, 5)])
        mock_cache.get = AsyncMock(return_value=CacheLookup.hit(cached.model_dump_json()))
        mock_uow.projects.get_by_owner_id = AsyncMock()

        result = await GetProjectsUseCase(mock_uow, mock_cache).execute("user-1")

        assert result.value == cached
        mock_uow.projects.get_by_owner_id.assert_not_called()
        mock_cache.set.assert_not_called()

    async def test_unavailable_cache_reads_store_without_writing(self, mock_uow, mock_cache, owned_projects):
        mock_cache.get = AsyncMock(return_value=CacheLookup.unavailable())

        result = await GetProjectsUseCase(mock_uow, mock_cache).execute("user-1")

        assert result.is_ok()
        assert len(result.value.projects) == 1
        mock_cache.set.assert_not_called()

    async def test_undecodable_entry_is_rebuilt(self, mock_uow, mock_cache, owned_projects):
        mock_cache.get = AsyncMock(return_value=CacheLookup.hit("{not json"))

        result = await GetProjectsUseCase(mock_uow, mock_cache).execute("user-1")

        assert result.is_ok()
        mock_uow.projects.get_by_owner_id.assert_called_once_with("user-1")
        mock_cache.set.assert_called_once()


class TestGetProjectById:
    async def test_miss_returns_tasks_with_assignees(self, mock_uow, mock_cache, project_with_tasks):
        result = await GetProjectByIdUseCase(mock_uow, mock_cache).execute("project-123", "user-1")

        assert result.is_ok()
        detail = result.value
        assert detail.task_count == 2
        assert [task.id for task in detail.tasks] == ["task-2", "task-1"]
        assert detail.tasks[1].assignee.name == "Ada Lovelace"
        assert detail.tasks[0].assignee is None
        assert mock_cache.set.call_args.args[0] == "project:project-123"

    async def test_not_found(self, mock_uow, mock_cache):
        mock_uow.projects.get_by_id = AsyncMock(return_value=None)

        result = await GetProjectByIdUseCase(mock_uow, mock_cache).execute("missing", "user-1")

        assert result.error.code == ErrorCode.NOT_FOUND
        mock_cache.set.assert_not_called()

    async def test_non_owner_is_rejected(self, mock_uow, mock_cache, project_with_tasks):
        result = await GetProjectByIdUseCase(mock_uow, mock_cache).execute("project-123", "intruder")

        assert result.error.code == ErrorCode.AUTHORIZATION_ERROR
        mock_cache.set.assert_not_called()

    async def test_cached_entry_still_checks_ownership(self, mock_uow, mock_cache, project_with_tasks):
        first = await GetProjectByIdUseCase(mock_uow, mock_cache).execute("project-123", "user-1")
        mock_cache.get = AsyncMock(return_value=CacheLookup.hit(first.value.model_dump_json()))
        mock_uow.projects.get_by_id.reset_mock()

        owner_read = await GetProjectByIdUseCase(mock_uow, mock_cache).execute("project-123", "user-1")
        intruder_read = await GetProjectByIdUseCase(mock_uow, mock_cache).execute("project-123", "intruder")

        assert owner_read.value == first.value
        assert intruder_read.error.code == ErrorCode.AUTHORIZATION_ERROR
        mock_uow.projects.get_by_id.assert_not_called()
