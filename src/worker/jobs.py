"""Export jobs executed by the rq worker

rq calls these synchronous functions from a worker process. Each call
runs the async use case in its own event loop with its own database
session.
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, Callable, Dict, Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import ErrorCode, Result
from src.adapter.services.local_file_storage import LocalFileStorage
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.file_storage import FileStorage
from src.app.use_cases.exports import ProcessExportUseCase
from src.domain.enums import ExportStatus

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AsyncContextManager[AsyncSession]]

_job_session_factory: Optional[SessionFactory] = None
_job_file_storage_factory: Optional[Callable[[], FileStorage]] = None


class ExportJobError(RuntimeError):
    """Raised so rq records the attempt as failed and schedules a retry"""

    def __init__(self, export_id: str, code: str, message: str):
        super().__init__(f"Export {export_id} failed ({code}): {message}")
        self.export_id = export_id
        self.code = code


def set_job_session_factory(factory: Optional[SessionFactory]) -> None:
    """Override the session factory used when executing jobs (tests)"""
    global _job_session_factory
    _job_session_factory = factory


def set_job_file_storage_factory(factory: Optional[Callable[[], FileStorage]]) -> None:
    """Override the artifact store used when executing jobs (tests)"""
    global _job_file_storage_factory
    _job_file_storage_factory = factory


@asynccontextmanager
async def _default_job_session_factory():
    # An async engine is bound to the event loop it was created in, and every
    # job runs in a fresh loop
    engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
    session_maker = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    try:
        async with session_maker() as session:
            yield session
    finally:
        await engine.dispose()


def _file_storage() -> FileStorage:
    if _job_file_storage_factory is not None:
        return _job_file_storage_factory()
    return LocalFileStorage(base_path=ApplicationConfig.EXPORT_STORAGE_PATH)


async def _process_export(export_id: str, project_id: str) -> Result:
    factory = _job_session_factory or _default_job_session_factory
    async with factory() as session:
        use_case = ProcessExportUseCase(SqlAlchemyUnitOfWork(session), _file_storage())
        return await use_case.execute(export_id, project_id)


def process_export_job(export_id: str, project_id: str, user_id: str) -> Dict[str, Any]:
    """
    Generate the report of one export

    Only a retryable error is raised back to rq, which then schedules the
    next attempt. Any other outcome finishes the job.
    """
    logger.info(f"Export job started: export={export_id} project={project_id} user={user_id}")

    result = asyncio.run(_process_export(export_id, project_id))

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.EXPORT_ALREADY_CLAIMED:
            # Redelivery or duplicate enqueue of an export another run owns
            logger.info(f"Export job skipped for {export_id}: {error.message}")
            return {"export_id": export_id, "status": "SKIPPED"}
        if error.retryable:
            raise ExportJobError(export_id, error.code, error.message)

        logger.error(f"Export job for {export_id} ended with {error.code}: {error.message}")
        return {"export_id": export_id, "status": ExportStatus.FAILED.value, "code": error.code}

    export = result.value
    return {
        "export_id": export_id,
        "status": ExportStatus(export.status).value,
        "file_path": export.file_path,
    }


def log_failed_attempt(job, connection, exc_type, exc_value, traceback) -> None:
    """rq failure callback; invoked for every failed attempt"""
    retries_left = job.retries_left or 0
    export_id = job.args[0] if job.args else None
    logger.error(
        f"Export job {job.id} attempt failed for export {export_id} "
        f"({retries_left} retries left): {exc_type.__name__}: {exc_value}"
    )
