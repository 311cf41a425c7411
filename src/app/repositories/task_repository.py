from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain import Task


class TaskRepository(ABC):
    """Repository interface for Task entity"""

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Create a new task"""
        pass

    @abstractmethod
    async def get_by_id(self, task_id: str) -> Optional[Task]:
        """Get task by ID"""
        pass

    @abstractmethod
    async def find_by_project_id(self, project_id: str, newest_first: bool = True) -> List[Task]:
        """Find all tasks for a project ordered by creation time"""
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """Update an existing task"""
        pass

    @abstractmethod
    async def delete(self, task: Task) -> None:
        """Delete a task"""
        pass
