"""Unit tests for the rq job functions"""
import logging
import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from libs.result import Error, ErrorCode, Return
from src.app.use_cases.exports import ExportDTO
from src.domain import Export
from src.worker import jobs
from src.worker.jobs import ExportJobError, log_failed_attempt, process_export_job


def _completed():
    export = Export(id="e1", project_id="p1", user_id="u1")
    export.start_processing()
    export.complete("project-p1.json")
    return ExportDTO.from_entity(export)


def test_completed_export_returns_summary():
    with patch.object(jobs, "_process_export", AsyncMock(return_value=Return.ok(_completed()))):
        result = process_export_job("e1", "p1", "u1")

    assert result == {"export_id": "e1", "status": "COMPLETED", "file_path": "project-p1.json"}


def test_already_claimed_export_is_skipped():
    error = Error(code=ErrorCode.EXPORT_ALREADY_CLAIMED, message="Export is COMPLETED, expected PENDING")
    with patch.object(jobs, "_process_export", AsyncMock(return_value=Return.err(error))):
        result = process_export_job("e1", "p1", "u1")

    assert result == {"export_id": "e1", "status": "SKIPPED"}


def test_retryable_error_raises_for_retry():
    error = Error(
        code=ErrorCode.INTERNAL_ERROR,
        message="Export could not be claimed",
        reason="database is unreachable",
        retryable=True,
    )
    with patch.object(jobs, "_process_export", AsyncMock(return_value=Return.err(error))):
        with pytest.raises(ExportJobError) as exc_info:
            process_export_job("e1", "p1", "u1")

    assert exc_info.value.export_id == "e1"
    assert exc_info.value.code == ErrorCode.INTERNAL_ERROR


@pytest.mark.parametrize("code", [ErrorCode.NOT_FOUND, ErrorCode.EXPORT_FAILED])
def test_non_retryable_error_finishes_the_job(code, caplog):
    error = Error(code=code, message="Export generation failed")
    with patch.object(jobs, "_process_export", AsyncMock(return_value=Return.err(error))):
        with caplog.at_level(logging.ERROR, logger="src.worker.jobs"):
            result = process_export_job("e1", "p1", "u1")

    assert result == {"export_id": "e1", "status": "FAILED", "code": code}
    assert f"ended with {code}" in caplog.text


def test_failure_callback_logs_each_attempt(caplog):
    job = MagicMock(id="export-e1", retries_left=1, args=("e1", "p1", "u1"))

    with caplog.at_level(logging.ERROR, logger="src.worker.jobs"):
        log_failed_attempt(job, None, ExportJobError, ExportJobError("e1", "NOT_FOUND", "gone"), None)

    assert "export e1" in caplog.text
    assert "1 retries left" in caplog.text
