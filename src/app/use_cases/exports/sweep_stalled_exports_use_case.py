"""Sweep Stalled Exports Use Case

Recovers exports that were never picked up or whose run died midway.
"""
import logging
from datetime import datetime, timedelta
from typing import Optional
from libs.result import Result, Return
from src.app.services.job_queue import (
    ExportJobPayload,
    ExportJobQueue,
    JobQueueUnavailableError,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.enums import ExportStatus
from .dtos import SweepReportDTO

logger = logging.getLogger(__name__)

STALLED_MESSAGE = "Export stalled"


class SweepStalledExportsUseCase:
    """
    Use case: Sweep Stalled Exports

    - PENDING longer than ``pending_after``: the delivery was lost, enqueue again
    - PROCESSING longer than ``stall_after``: the run died, mark FAILED

    Re-enqueueing is safe because a run only proceeds after claiming the
    export, so a duplicate delivery does nothing.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        job_queue: Optional[ExportJobQueue],
        pending_after: timedelta,
        stall_after: timedelta,
        clock=datetime.utcnow,
    ):
        self.uow = uow
        self.job_queue = job_queue
        self.pending_after = pending_after
        self.stall_after = stall_after
        self.clock = clock

    async def execute(self) -> Result[SweepReportDTO]:
        now = self.clock()
        report = SweepReportDTO()

        async with self.uow:
            stalled = await self.uow.exports.find_stale(
                ExportStatus.PROCESSING, now - self.stall_after
            )
            for export in stalled:
                export.fail(STALLED_MESSAGE)
                await self.uow.exports.update(export)
                report.failed.append(export.id)
            if stalled:
                await self.uow.commit()

            payloads = []
            if self.job_queue is not None:
                pending = await self.uow.exports.find_stale(
                    ExportStatus.PENDING, now - self.pending_after
                )
                payloads = [
                    ExportJobPayload(
                        export_id=export.id, project_id=export.project_id, user_id=export.user_id
                    )
                    for export in pending
                ]

        for payload in payloads:
            try:
                await self.job_queue.enqueue_export(payload)
            except JobQueueUnavailableError as e:
                logger.warning(f"Queue unavailable, stopping requeue of stale exports: {e}")
                break
            report.requeued.append(payload.export_id)

        if report.failed:
            logger.warning(f"Marked {len(report.failed)} stalled exports as FAILED")
        if report.requeued:
            logger.info(f"Re-enqueued {len(report.requeued)} pending exports")
        return Return.ok(report)
