"""Export DTOs

Data Transfer Objects for project export functionality.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel
from src.domain.enums import ExportStatus
from src.domain.export import Export


class ExportDTO(BaseModel):
    """A single export record"""
    id: str
    project_id: str
    user_id: str
    status: ExportStatus
    file_path: Optional[str] = None
    error_message: Optional[str] = None
    created_at: datetime
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, export: Export) -> "ExportDTO":
        return cls(
            id=export.id,
            project_id=export.project_id,
            user_id=export.user_id,
            status=export.status,
            file_path=export.file_path,
            error_message=export.error_message,
            created_at=export.created_at,
            started_at=export.started_at,
            completed_at=export.completed_at,
        )


class ExportStatusDTO(ExportDTO):
    """Export record joined with its project name"""
    project_name: str
    download_url: Optional[str] = None

    @classmethod
    def from_row(
        cls, export: Export, project_name: str, download_base: str = "/api/exports"
    ) -> "ExportStatusDTO":
        download_url = None
        if export.is_downloadable:
            download_url = f"{download_base}/{export.id}/download"
        return cls(
            **ExportDTO.from_entity(export).model_dump(),
            project_name=project_name,
            download_url=download_url,
        )


class CreateExportResponseDTO(BaseModel):
    """Response DTO for requesting an export"""
    export_id: str
    status: ExportStatus
    execution: str  # "queued" or "inline"
    message: str


class ExportDownloadDTO(BaseModel):
    """Artifact bytes of a completed export"""
    filename: str
    content: bytes


class SweepReportDTO(BaseModel):
    """Exports touched by one stalled-export sweep"""
    requeued: List[str] = []
    failed: List[str] = []
