from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple
from src.domain.export import Export
from src.domain.enums import ExportStatus


class IExportRepository(ABC):
    """Interface for Export repository"""

    @abstractmethod
    async def create(self, export: Export) -> Export:
        """Create a new export in PENDING state"""
        pass

    @abstractmethod
    async def get_by_id(self, export_id: str) -> Optional[Export]:
        """Get export by ID, bypassing any stale session state"""
        pass

    @abstractmethod
    async def get_with_project_name(self, export_id: str) -> Optional[Tuple[Export, str]]:
        """Get export by ID joined with its project name"""
        pass

    @abstractmethod
    async def list_by_user(self, user_id: str) -> List[Tuple[Export, str]]:
        """Get all exports of a user with project names, newest first"""
        pass

    @abstractmethod
    async def claim(self, export_id: str) -> Optional[Export]:
        """
        Atomically move a PENDING export to PROCESSING.

        Returns the claimed export, or None when the export is not PENDING
        (already claimed by another run, or terminal).
        """
        pass

    @abstractmethod
    async def update(self, export: Export) -> Export:
        """Update an existing export"""
        pass

    @abstractmethod
    async def find_stale(
        self, status: ExportStatus, older_than: datetime, limit: int = 50
    ) -> List[Export]:
        """Get exports that have stayed in a status since before a cutoff"""
        pass
