"""RQ Export Queue Adapter

Enqueues export jobs on a Redis-backed rq queue. Each job is retried with
exponential backoff and every failed attempt is logged by the worker.
"""
import asyncio
import logging
from redis import Redis
from redis.exceptions import RedisError
from rq import Callback, Queue, Retry
from src.app.services.job_queue import (
    ExportJobPayload,
    ExportJobQueue,
    JobQueueUnavailableError,
)
from src.app.services.retry_scheduler import backoff_intervals

logger = logging.getLogger(__name__)

PROCESS_EXPORT_JOB = "src.worker.jobs.process_export_job"
LOG_FAILED_ATTEMPT = "src.worker.jobs.log_failed_attempt"


def export_job_id(export_id: str) -> str:
    return f"export-{export_id}"


class RqExportQueue(ExportJobQueue):
    def __init__(
        self,
        connection: Redis,
        queue_name: str = "project-exports",
        max_attempts: int = 3,
        backoff_seconds: int = 2,
        timeout_seconds: int = 300,
        result_ttl_seconds: int = 24 * 3600,
    ):
        self.queue = Queue(queue_name, connection=connection, default_timeout=timeout_seconds)
        self.max_attempts = max_attempts
        self.backoff_seconds = backoff_seconds
        self.result_ttl_seconds = result_ttl_seconds

    def _retry(self):
        if self.max_attempts <= 1:
            return None
        return Retry(
            max=self.max_attempts - 1,
            interval=backoff_intervals(self.max_attempts, self.backoff_seconds),
        )

    def _enqueue(self, payload: ExportJobPayload) -> str:
        job = self.queue.enqueue(
            PROCESS_EXPORT_JOB,
            payload.export_id,
            payload.project_id,
            payload.user_id,
            job_id=export_job_id(payload.export_id),
            retry=self._retry(),
            result_ttl=self.result_ttl_seconds,
            failure_ttl=self.result_ttl_seconds,
            on_failure=Callback(LOG_FAILED_ATTEMPT),
            description=f"Export project {payload.project_id} ({payload.export_id})",
        )
        return job.id

    async def enqueue_export(self, payload: ExportJobPayload) -> str:
        try:
            job_id = await asyncio.to_thread(self._enqueue, payload)
        except (RedisError, OSError) as e:
            logger.error(f"Failed to enqueue export {payload.export_id}: {e}")
            raise JobQueueUnavailableError("Unable to enqueue export; Redis is unavailable.") from e

        logger.info(f"Enqueued export job {job_id} on queue {self.queue.name}")
        return job_id
