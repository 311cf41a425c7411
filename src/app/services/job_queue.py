"""Export job queue interface"""
from abc import ABC, abstractmethod
from dataclasses import dataclass


class JobQueueUnavailableError(RuntimeError):
    """Raised when the queue broker cannot accept a job"""


@dataclass(frozen=True)
class ExportJobPayload:
    export_id: str
    project_id: str
    user_id: str


class ExportJobQueue(ABC):
    @abstractmethod
    async def enqueue_export(self, payload: ExportJobPayload) -> str:
        """
        Enqueue an export for background processing

        Returns:
            str: Queue job ID

        Raises:
            JobQueueUnavailableError: if the broker cannot be reached
        """
        pass
