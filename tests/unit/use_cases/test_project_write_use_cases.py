"""
Unit tests for project mutations and their cache invalidation
"""
from unittest.mock import AsyncMock
from libs.result import ErrorCode
from src.app.use_cases.projects import (
    CreateProjectCommand,
    CreateProjectUseCase,
    DeleteProjectUseCase,
    UpdateProjectCommand,
    UpdateProjectUseCase,
)


async def test_create_project_invalidates_owner_list(mock_uow, mock_invalidator):
    mock_uow.projects.create = AsyncMock(side_effect=lambda project: project)
    command = CreateProjectCommand(name="  Launch  ", description="Q3", owner_id="user-1")

    result = await CreateProjectUseCase(mock_uow, mock_invalidator).execute(command)

    assert result.is_ok()
    assert result.value.name == "Launch"
    assert result.value.task_count == 0
    mock_uow.commit.assert_called_once()
    mock_invalidator.project_created.assert_awaited_once_with("user-1")


async def test_create_project_rejects_blank_name(mock_uow, mock_invalidator):
    mock_uow.projects.create = AsyncMock()

    result = await CreateProjectUseCase(mock_uow, mock_invalidator).execute(
        CreateProjectCommand(name="   ", owner_id="user-1")
    )

    assert result.error.code == ErrorCode.VALIDATION_ERROR
    mock_uow.projects.create.assert_not_called()
    mock_invalidator.project_created.assert_not_called()


async def test_update_project_invalidates_list_and_detail(mock_uow, mock_invalidator, sample_project):
    mock_uow.projects.get_by_id = AsyncMock(return_value=sample_project)
    mock_uow.projects.update = AsyncMock(side_effect=lambda project: project)
    mock_uow.projects.count_tasks = AsyncMock(return_value={sample_project.id: 3})
    command = UpdateProjectCommand(project_id=sample_project.id, user_id="user-1", name="Renamed")

    result = await UpdateProjectUseCase(mock_uow, mock_invalidator).execute(command)

    assert result.value.name == "Renamed"
    assert result.value.description == "Test Description"
    assert result.value.task_count == 3
    mock_invalidator.project_updated.assert_awaited_once_with("user-1", "project-123")


async def test_update_project_by_non_owner(mock_uow, mock_invalidator, sample_project):
    mock_uow.projects.get_by_id = AsyncMock(return_value=sample_project)
    mock_uow.projects.update = AsyncMock()

    result = await UpdateProjectUseCase(mock_uow, mock_invalidator).execute(
        UpdateProjectCommand(project_id=sample_project.id, user_id="intruder", name="Mine now")
    )

    assert result.error.code == ErrorCode.AUTHORIZATION_ERROR
    assert sample_project.name == "Test Project"
    mock_uow.projects.update.assert_not_called()
    mock_invalidator.project_updated.assert_not_called()


async def test_update_missing_project(mock_uow, mock_invalidator):
    mock_uow.projects.get_by_id = AsyncMock(return_value=None)

    result = await UpdateProjectUseCase(mock_uow, mock_invalidator).execute(
        UpdateProjectCommand(project_id="missing", user_id="user-1", name="x")
    )

    assert result.error.code == ErrorCode.NOT_FOUND


async def test_delete_project_invalidates_list_and_detail(mock_uow, mock_invalidator, sample_project):
    mock_uow.projects.get_by_id = AsyncMock(return_value=sample_project)
    mock_uow.projects.delete = AsyncMock()

    result = await DeleteProjectUseCase(mock_uow, mock_invalidator).execute(sample_project.id, "user-1")

    assert result.value.deleted is True
    mock_uow.projects.delete.assert_awaited_once_with(sample_project)
    mock_uow.commit.assert_called_once()
    mock_invalidator.project_deleted.assert_awaited_once_with("user-1", "project-123")


async def test_delete_project_by_non_owner(mock_uow, mock_invalidator, sample_project):
    mock_uow.projects.get_by_id = AsyncMock(return_value=sample_project)
    mock_uow.projects.delete = AsyncMock()

    result = await DeleteProjectUseCase(mock_uow, mock_invalidator).execute(sample_project.id, "intruder")

    assert result.error.code == ErrorCode.AUTHORIZATION_ERROR
    mock_uow.projects.delete.assert_not_called()
    mock_invalidator.project_deleted.assert_not_called()
