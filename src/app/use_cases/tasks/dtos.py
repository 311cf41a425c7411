from typing import Dict, Optional
from pydantic import BaseModel, Field, field_validator
from datetime import datetime, timezone
from src.domain import Task, User
from src.domain.enums import TaskPriority, TaskStatus


def _naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Timestamp columns hold naive UTC
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class CreateTaskRequest(BaseModel):
    """Request DTO for creating a task (API layer - from user input)"""

    project_id: str
    title: str = Field(min_length=1, max_length=500)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    assigned_to: Optional[str] = None
    due_date: Optional[datetime] = None

    @field_validator("due_date")
    @classmethod
    def due_date_to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _naive_utc(value)


class CreateTaskCommand(CreateTaskRequest):
    """Command DTO for creating a task (Use case layer - includes auth context)"""

    user_id: str


class UpdateTaskRequest(BaseModel):
    """
    Request DTO for updating a task (API layer)

    Only fields present in the request body are applied; an explicit
    ``"assigned_to": null`` unassigns the task.
    """

    title: Optional[str] = Field(default=None, min_length=1, max_length=500)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    assigned_to: Optional[str] = None
    due_date: Optional[datetime] = None

    @field_validator("due_date")
    @classmethod
    def due_date_to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _naive_utc(value)


class UpdateTaskCommand(UpdateTaskRequest):
    """Command DTO for updating a task (Use case layer)"""

    task_id: str
    user_id: str


class AssigneeDTO(BaseModel):
    id: str
    name: str
    email: str


class TaskDTO(BaseModel):
    """Task with its assignee, as returned by task endpoints and project detail"""

    id: str
    project_id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    assigned_to: Optional[str] = None
    assignee: Optional[AssigneeDTO] = None
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, task: Task, assignees: Dict[str, User]) -> "TaskDTO":
        user = assignees.get(task.assigned_to) if task.assigned_to else None
        return cls(
            id=task.id,
            project_id=task.project_id,
            title=task.title,
            description=task.description,
            status=task.status,
            priority=task.priority,
            assigned_to=task.assigned_to,
            assignee=AssigneeDTO(id=user.id, name=user.name, email=user.email) if user else None,
            due_date=task.due_date,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class DeleteTaskResponse(BaseModel):
    id: str
    deleted: bool = True
