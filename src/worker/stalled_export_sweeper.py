"""Stalled Export Sweeper

Background loop that re-enqueues exports whose delivery was lost and
fails exports whose run died while PROCESSING.

Usage:
    python -m src.worker.stalled_export_sweeper
"""
import asyncio
import logging
from datetime import timedelta
from typing import Optional
from redis import Redis
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.rq_export_queue import RqExportQueue
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.job_queue import ExportJobQueue
from src.app.use_cases.exports import SweepStalledExportsUseCase

logger = logging.getLogger(__name__)


class StalledExportSweeper:
    """Polls the exports table for stalled exports"""

    def __init__(
        self,
        session_maker,
        job_queue: Optional[ExportJobQueue],
        pending_after: timedelta,
        stall_after: timedelta,
        poll_interval: int = 60,
    ):
        """
        Args:
            session_maker: Factory of AsyncSession objects
            job_queue: Queue for lost deliveries; None only fails stalled runs
            pending_after: Age after which a PENDING export is re-enqueued
            stall_after: Age after which a PROCESSING export is failed
            poll_interval: Polling interval in seconds
        """
        self.session_maker = session_maker
        self.job_queue = job_queue
        self.pending_after = pending_after
        self.stall_after = stall_after
        self.poll_interval = poll_interval
        self.running = False

    async def start(self):
        self.running = True
        logger.info("StalledExportSweeper started")

        while self.running:
            try:
                await self.sweep()
            except Exception as e:
                logger.error(f"Error sweeping stalled exports: {e}")

            await asyncio.sleep(self.poll_interval)

    async def stop(self):
        self.running = False
        logger.info("StalledExportSweeper stopped")

    async def sweep(self):
        async with self.session_maker() as session:
            use_case = SweepStalledExportsUseCase(
                SqlAlchemyUnitOfWork(session),
                self.job_queue,
                pending_after=self.pending_after,
                stall_after=self.stall_after,
            )
            result = await use_case.execute()
            return result.value


async def run_sweeper(database_url: str, redis_url: str):
    engine = create_async_engine(database_url, echo=False)
    AsyncSessionLocal = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )

    job_queue = RqExportQueue(
        Redis.from_url(redis_url),
        queue_name=ApplicationConfig.EXPORT_QUEUE_NAME,
        max_attempts=ApplicationConfig.EXPORT_JOB_MAX_ATTEMPTS,
        backoff_seconds=ApplicationConfig.EXPORT_JOB_BACKOFF_SECONDS,
        timeout_seconds=ApplicationConfig.EXPORT_JOB_TIMEOUT_SECONDS,
        result_ttl_seconds=ApplicationConfig.EXPORT_JOB_RESULT_TTL_SECONDS,
    )
    sweeper = StalledExportSweeper(
        AsyncSessionLocal,
        job_queue,
        pending_after=timedelta(seconds=ApplicationConfig.EXPORT_PENDING_REQUEUE_SECONDS),
        stall_after=timedelta(seconds=ApplicationConfig.EXPORT_STALL_TIMEOUT_SECONDS),
        poll_interval=ApplicationConfig.SWEEPER_POLL_INTERVAL_SECONDS,
    )

    try:
        await sweeper.start()
    except asyncio.CancelledError:
        logger.info("Received shutdown signal")
        await sweeper.stop()
    finally:
        await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logger.info(f"Starting StalledExportSweeper with DB: {ApplicationConfig.DB_URI[:50]}...")
    try:
        asyncio.run(run_sweeper(ApplicationConfig.DB_URI, ApplicationConfig.REDIS_URL))
    except KeyboardInterrupt:
        logger.info("StalledExportSweeper interrupted")
