from fastapi import APIRouter, Depends, status
from src.api.error import raise_for_error
from src.api.schemas.response import ApiResponse
from src.app.services.cache import Cache
from src.app.services.cache_invalidator import CacheInvalidator
from src.app.services.unit_of_work import UnitOfWork
from src.depends import get_cache, get_cache_invalidator, get_current_user, get_unit_of_work
from src.app.use_cases.projects import (
    CreateProjectUseCase,
    CreateProjectRequest,
    CreateProjectCommand,
    UpdateProjectUseCase,
    UpdateProjectRequest,
    UpdateProjectCommand,
    DeleteProjectUseCase,
    DeleteProjectResponse,
    GetProjectsUseCase,
    GetProjectsResponse,
    GetProjectByIdUseCase,
    ProjectDTO,
    ProjectDetailDTO,
)
from config import ApplicationConfig

router = APIRouter()


@router.get("/projects", response_model=ApiResponse[GetProjectsResponse], status_code=status.HTTP_200_OK)
async def get_projects(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: Cache = Depends(get_cache),
):
    """Get all projects of the current user (requires authentication)"""
    use_case = GetProjectsUseCase(uow, cache, ttl_seconds=ApplicationConfig.CACHE_TTL_USER_PROJECTS)
    result = await use_case.execute(user_id=current_user["user_id"])

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.get(
    "/projects/{project_id}", response_model=ApiResponse[ProjectDetailDTO], status_code=status.HTTP_200_OK
)
async def get_project_by_id(
    project_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: Cache = Depends(get_cache),
):
    """Get a single project with its tasks (requires authentication)"""
    use_case = GetProjectByIdUseCase(uow, cache, ttl_seconds=ApplicationConfig.CACHE_TTL_PROJECT_DETAIL)
    result = await use_case.execute(project_id=project_id, user_id=current_user["user_id"])

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.post("/projects", response_model=ApiResponse[ProjectDTO], status_code=status.HTTP_201_CREATED)
async def create_project(
    request: CreateProjectRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: CacheInvalidator = Depends(get_cache_invalidator),
):
    """Create a new project owned by the current user"""
    command = CreateProjectCommand(
        name=request.name,
        description=request.description,
        owner_id=current_user["user_id"],
    )

    result = await CreateProjectUseCase(uow, invalidator).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.patch(
    "/projects/{project_id}", response_model=ApiResponse[ProjectDTO], status_code=status.HTTP_200_OK
)
async def update_project(
    project_id: str,
    request: UpdateProjectRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: CacheInvalidator = Depends(get_cache_invalidator),
):
    """Update name and/or description of a project"""
    command = UpdateProjectCommand(
        project_id=project_id,
        name=request.name,
        description=request.description,
        user_id=current_user["user_id"],
    )

    result = await UpdateProjectUseCase(uow, invalidator).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.delete(
    "/projects/{project_id}", response_model=ApiResponse[DeleteProjectResponse], status_code=status.HTTP_200_OK
)
async def delete_project(
    project_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: CacheInvalidator = Depends(get_cache_invalidator),
):
    """Delete a project with its tasks and exports"""
    result = await DeleteProjectUseCase(uow, invalidator).execute(
        project_id=project_id, user_id=current_user["user_id"]
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)
