"""Worker module - Background processing for taskboard exports.

Contains:
- process_export_job: rq job generating one export report
- export_worker: rq worker entry point
- StalledExportSweeper: recovers lost and stalled exports
"""
from .jobs import ExportJobError, process_export_job
from .stalled_export_sweeper import StalledExportSweeper, run_sweeper

__all__ = ["ExportJobError", "process_export_job", "StalledExportSweeper", "run_sweeper"]
