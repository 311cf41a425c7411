from fastapi import APIRouter, Depends, status
from src.api.error import raise_for_error
from src.api.schemas.response import ApiResponse
from src.app.services.cache_invalidator import CacheInvalidator
from src.app.services.unit_of_work import UnitOfWork
from src.depends import get_cache_invalidator, get_current_user, get_unit_of_work
from src.app.use_cases.tasks import (
    CreateTaskUseCase,
    CreateTaskRequest,
    CreateTaskCommand,
    UpdateTaskUseCase,
    UpdateTaskRequest,
    UpdateTaskCommand,
    DeleteTaskUseCase,
    DeleteTaskResponse,
    TaskDTO,
)

router = APIRouter()


@router.post("/tasks", response_model=ApiResponse[TaskDTO], status_code=status.HTTP_201_CREATED)
async def create_task(
    request: CreateTaskRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: CacheInvalidator = Depends(get_cache_invalidator),
):
    """Create a task in a project owned by the current user"""
    command = CreateTaskCommand(**request.model_dump(), user_id=current_user["user_id"])

    result = await CreateTaskUseCase(uow, invalidator).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.patch("/tasks/{task_id}", response_model=ApiResponse[TaskDTO], status_code=status.HTTP_200_OK)
async def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: CacheInvalidator = Depends(get_cache_invalidator),
):
    """Partially update a task; only fields present in the body change"""
    # exclude_unset keeps "absent" distinct from an explicit null
    command = UpdateTaskCommand(
        task_id=task_id,
        user_id=current_user["user_id"],
        **request.model_dump(exclude_unset=True),
    )

    result = await UpdateTaskUseCase(uow, invalidator).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)


@router.delete("/tasks/{task_id}", response_model=ApiResponse[DeleteTaskResponse], status_code=status.HTTP_200_OK)
async def delete_task(
    task_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: CacheInvalidator = Depends(get_cache_invalidator),
):
    result = await DeleteTaskUseCase(uow, invalidator).execute(
        task_id=task_id, user_id=current_user["user_id"]
    )

    if result.is_err():
        raise_for_error(result.error)

    return ApiResponse(data=result.value)
