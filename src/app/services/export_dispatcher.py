"""Export Dispatcher

Decides how a freshly created export runs: on the background queue when
the broker is reachable, inline in the current request otherwise. A
broker outage never rejects an export.
"""
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional
from libs.result import Result, Return
from src.app.services.availability import ServiceAvailability
from src.app.services.job_queue import (
    ExportJobPayload,
    ExportJobQueue,
    JobQueueUnavailableError,
)
from src.domain.enums import ExportStatus

logger = logging.getLogger(__name__)

QUEUED = "queued"
INLINE = "inline"

ProcessExport = Callable[[str, str], Awaitable[Result]]


@dataclass
class DispatchOutcome:
    export_id: str
    mode: str
    status: ExportStatus
    job_id: Optional[str] = None

    @property
    def queued(self) -> bool:
        return self.mode == QUEUED


class ExportDispatcher:
    def __init__(
        self,
        availability: ServiceAvailability,
        job_queue: Optional[ExportJobQueue],
        process_export: ProcessExport,
    ):
        """
        Args:
            availability: Broker health, checked on every dispatch
            job_queue: Queue used while the broker is available; None disables queueing
            process_export: Runs one export to completion, used for the inline path
        """
        self.availability = availability
        self.job_queue = job_queue
        self.process_export = process_export

    async def dispatch(self, export_id: str, project_id: str, user_id: str) -> Result[DispatchOutcome]:
        """
        Dispatch a PENDING export

        Returns:
            Result[DispatchOutcome]: queued outcome (export still PENDING), or
            inline outcome (export COMPLETED). An inline failure is returned as
            the error of the run, after the export was marked FAILED.
        """
        if self.job_queue is not None and await self.availability.is_available():
            payload = ExportJobPayload(export_id=export_id, project_id=project_id, user_id=user_id)
            try:
                job_id = await self.job_queue.enqueue_export(payload)
                return Return.ok(DispatchOutcome(
                    export_id=export_id,
                    mode=QUEUED,
                    status=ExportStatus.PENDING,
                    job_id=job_id,
                ))
            except JobQueueUnavailableError as e:
                self.availability.mark_unavailable(str(e))
                logger.warning(f"Queue rejected export {export_id}, running inline: {e}")

        logger.info(f"Processing export {export_id} synchronously")
        result = await self.process_export(export_id, project_id)
        if result.is_err():
            return result

        return Return.ok(DispatchOutcome(
            export_id=export_id,
            mode=INLINE,
            status=ExportStatus(result.value.status),
        ))
