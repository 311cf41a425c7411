"""Export Entity

Tracks one generation attempt of a project's JSON report.

Lifecycle: PENDING -> PROCESSING -> COMPLETED | FAILED. Terminal states
never transition again and ``file_path`` is set only once COMPLETED.
"""
from datetime import datetime
from typing import Optional
from sqlmodel import Field
from src.domain.base import BaseModel, generate_uuid
from src.domain.enums import ExportStatus


ALLOWED_TRANSITIONS = {
    ExportStatus.PENDING: {ExportStatus.PROCESSING},
    ExportStatus.PROCESSING: {ExportStatus.COMPLETED, ExportStatus.FAILED},
    ExportStatus.COMPLETED: set(),
    ExportStatus.FAILED: set(),
}

TERMINAL_STATUSES = {ExportStatus.COMPLETED, ExportStatus.FAILED}


class InvalidExportTransition(Exception):
    """Raised when an export is moved to a state its lifecycle forbids"""

    def __init__(self, current: ExportStatus, target: ExportStatus):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move export from {current.value} to {target.value}")


class Export(BaseModel, table=True):
    __tablename__ = "exports"

    id: str = Field(default_factory=generate_uuid, primary_key=True)

    # Foreign keys
    user_id: str = Field(foreign_key="users.id", index=True, nullable=False)
    project_id: str = Field(
        foreign_key="projects.id", ondelete="CASCADE", index=True, nullable=False
    )

    # Job status
    status: ExportStatus = Field(default=ExportStatus.PENDING, nullable=False, index=True)

    # Artifact reference, relative to the export storage root
    file_path: Optional[str] = Field(default=None)

    # Error tracking
    error_message: Optional[str] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    started_at: Optional[datetime] = Field(default=None)
    completed_at: Optional[datetime] = Field(default=None)

    # Business logic methods

    @property
    def is_terminal(self) -> bool:
        return ExportStatus(self.status) in TERMINAL_STATUSES

    @property
    def is_downloadable(self) -> bool:
        return ExportStatus(self.status) == ExportStatus.COMPLETED and bool(self.file_path)

    def _transition(self, target: ExportStatus) -> None:
        current = ExportStatus(self.status)
        if target not in ALLOWED_TRANSITIONS[current]:
            raise InvalidExportTransition(current, target)
        self.status = target

    def start_processing(self) -> None:
        """Mark export as processing"""
        self._transition(ExportStatus.PROCESSING)
        self.started_at = datetime.utcnow()

    def complete(self, file_path: str) -> None:
        """Mark export as completed with its artifact reference"""
        if not file_path:
            raise ValueError("A completed export requires an artifact reference")
        self._transition(ExportStatus.COMPLETED)
        self.file_path = file_path
        self.completed_at = datetime.utcnow()

    def fail(self, error_message: str) -> None:
        """Mark export as failed with error message"""
        self._transition(ExportStatus.FAILED)
        self.file_path = None
        self.error_message = error_message
        self.completed_at = datetime.utcnow()
