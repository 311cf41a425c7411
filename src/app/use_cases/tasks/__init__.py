from src.app.use_cases.tasks.create_task_use_case import CreateTaskUseCase
from src.app.use_cases.tasks.update_task_use_case import UpdateTaskUseCase
from src.app.use_cases.tasks.delete_task_use_case import DeleteTaskUseCase
from src.app.use_cases.tasks.dtos import (
    AssigneeDTO,
    CreateTaskCommand,
    CreateTaskRequest,
    DeleteTaskResponse,
    TaskDTO,
    UpdateTaskCommand,
    UpdateTaskRequest,
)

__all__ = [
    "CreateTaskUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    "AssigneeDTO",
    "CreateTaskCommand",
    "CreateTaskRequest",
    "DeleteTaskResponse",
    "TaskDTO",
    "UpdateTaskCommand",
    "UpdateTaskRequest",
]
