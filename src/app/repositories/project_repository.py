from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from src.domain import Project


class ProjectRepository(ABC):
    """Repository interface for Project entity"""

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """Create a new project"""
        pass

    @abstractmethod
    async def get_by_id(self, project_id: str) -> Optional[Project]:
        """Get project by ID"""
        pass

    @abstractmethod
    async def get_by_owner_id(self, owner_id: str) -> List[Project]:
        """Get all projects of an owner, newest first"""
        pass

    @abstractmethod
    async def count_tasks(self, project_ids: List[str]) -> Dict[str, int]:
        """Count tasks per project"""
        pass

    @abstractmethod
    async def update(self, project: Project) -> Project:
        """Update an existing project"""
        pass

    @abstractmethod
    async def delete(self, project: Project) -> None:
        """Delete a project together with its tasks and exports"""
        pass
