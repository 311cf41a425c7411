from .dtos import (
    CreateExportResponseDTO,
    ExportDTO,
    ExportDownloadDTO,
    ExportStatusDTO,
    SweepReportDTO,
)
from .create_export_use_case import CreateExportUseCase
from .process_export_use_case import ProcessExportUseCase
from .get_export_status_use_case import GetExportStatusUseCase
from .list_user_exports_use_case import ListUserExportsUseCase
from .download_export_use_case import DownloadExportUseCase
from .sweep_stalled_exports_use_case import SweepStalledExportsUseCase

__all__ = [
    "CreateExportResponseDTO",
    "ExportDTO",
    "ExportDownloadDTO",
    "ExportStatusDTO",
    "SweepReportDTO",
    "CreateExportUseCase",
    "ProcessExportUseCase",
    "GetExportStatusUseCase",
    "ListUserExportsUseCase",
    "DownloadExportUseCase",
    "SweepStalledExportsUseCase",
]
