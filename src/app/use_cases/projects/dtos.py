from typing import List, Optional
from pydantic import BaseModel, Field
from datetime import datetime
from src.domain import Project
from src.app.use_cases.tasks.dtos import TaskDTO


class CreateProjectRequest(BaseModel):
    """Request DTO for creating a project (API layer - from user input)"""

    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None


class CreateProjectCommand(BaseModel):
    """Command DTO for creating a project (Use case layer - includes auth context)"""

    name: str
    description: Optional[str] = None
    owner_id: str


class UpdateProjectRequest(BaseModel):
    """Request DTO for updating a project (API layer)"""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None


class UpdateProjectCommand(BaseModel):
    """Command DTO for updating a project (Use case layer)"""

    project_id: str
    user_id: str
    name: Optional[str] = None
    description: Optional[str] = None


class ProjectDTO(BaseModel):
    """Project DTO for listing and single project retrieval"""

    id: str
    owner_id: str
    name: str
    description: Optional[str]
    created_at: datetime
    updated_at: datetime
    task_count: int = 0  # Number of tasks in this project

    @classmethod
    def from_entity(cls, project: Project, task_count: int = 0) -> "ProjectDTO":
        return cls(
            id=str(project.id),
            owner_id=str(project.owner_id),
            name=project.name,
            description=project.description,
            created_at=project.created_at,
            updated_at=project.updated_at,
            task_count=task_count,
        )


class ProjectDetailDTO(ProjectDTO):
    """Single project with its tasks, newest first"""

    tasks: List[TaskDTO] = []


class GetProjectsResponse(BaseModel):
    """Response DTO for GetProjectsUseCase"""

    projects: List[ProjectDTO]


class DeleteProjectResponse(BaseModel):
    id: str
    deleted: bool = True
