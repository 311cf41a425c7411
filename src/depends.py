import logging
from typing import Optional
from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from redis import Redis
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error, ErrorCode
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.adapter.services.local_file_storage import LocalFileStorage
from src.adapter.services.redis_availability import RedisAvailability
from src.adapter.services.redis_cache import RedisCache
from src.adapter.services.rq_export_queue import RqExportQueue
from src.adapter.services.security import BcryptPasswordHasher, JoseTokenIssuer
from src.api.error import ClientError
from src.api.utils.jwt import verify_jwt
from src.app.services.availability import ServiceAvailability
from src.app.services.cache import Cache, DisabledCache
from src.app.services.cache_invalidator import CacheInvalidator
from src.app.services.export_dispatcher import ExportDispatcher
from src.app.services.file_storage import FileStorage
from src.app.services.job_queue import ExportJobQueue
from src.app.services.security import PasswordHasher, TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.exports import ProcessExportUseCase

logger = logging.getLogger(__name__)

# PostgreSQL engine
engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Redis connections are opened lazily on first command
queue_connection = Redis.from_url(
    ApplicationConfig.REDIS_URL, socket_connect_timeout=1, socket_timeout=2
)

_cache: Optional[Cache] = None
_availability: Optional[ServiceAvailability] = None
_job_queue: Optional[ExportJobQueue] = None


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_cache() -> Cache:
    """Process-wide cache; a disabled cache when caching is switched off"""
    global _cache
    if _cache is None:
        if ApplicationConfig.CACHE_ENABLED:
            _cache = RedisCache.from_url(ApplicationConfig.REDIS_URL)
        else:
            _cache = DisabledCache()
    return _cache


def get_cache_invalidator(cache: Cache = Depends(get_cache)) -> CacheInvalidator:
    return CacheInvalidator(cache)


def get_availability() -> ServiceAvailability:
    global _availability
    if _availability is None:
        _availability = RedisAvailability(
            queue_connection, recheck_seconds=ApplicationConfig.AVAILABILITY_RECHECK_SECONDS
        )
    return _availability


def get_job_queue() -> ExportJobQueue:
    global _job_queue
    if _job_queue is None:
        _job_queue = RqExportQueue(
            queue_connection,
            queue_name=ApplicationConfig.EXPORT_QUEUE_NAME,
            max_attempts=ApplicationConfig.EXPORT_JOB_MAX_ATTEMPTS,
            backoff_seconds=ApplicationConfig.EXPORT_JOB_BACKOFF_SECONDS,
            timeout_seconds=ApplicationConfig.EXPORT_JOB_TIMEOUT_SECONDS,
            result_ttl_seconds=ApplicationConfig.EXPORT_JOB_RESULT_TTL_SECONDS,
        )
    return _job_queue


def get_file_storage() -> FileStorage:
    """Dependency for export artifact storage"""
    return LocalFileStorage(base_path=ApplicationConfig.EXPORT_STORAGE_PATH)


def get_export_dispatcher(
    uow: UnitOfWork = Depends(get_unit_of_work),
    file_storage: FileStorage = Depends(get_file_storage),
    availability: ServiceAvailability = Depends(get_availability),
    job_queue: ExportJobQueue = Depends(get_job_queue),
) -> ExportDispatcher:
    process_export = ProcessExportUseCase(uow, file_storage).execute
    return ExportDispatcher(availability, job_queue, process_export)


def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher()


def get_token_issuer() -> TokenIssuer:
    return JoseTokenIssuer(
        secret=ApplicationConfig.JWT_SECRET,
        algorithm=ApplicationConfig.JWT_ALGORITHM,
        expires_in_seconds=ApplicationConfig.JWT_EXPIRES_IN_SECONDS,
    )


# Security
security = HTTPBearer(auto_error=False)


def _unauthenticated(message: str) -> ClientError:
    return ClientError(
        Error(code=ErrorCode.AUTHENTICATION_ERROR, message=message),
        status_code=status.HTTP_401_UNAUTHORIZED,
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Dependency to extract and validate JWT token from Authorization header

    Returns:
        dict: Decoded JWT payload with user_id and email

    Raises:
        ClientError: 401 if token is missing or invalid
    """
    if ApplicationConfig.AUTH_DISABLED:
        # For local development only
        return {"user_id": "test-user-id", "email": "test@example.com"}

    if credentials is None:
        raise _unauthenticated("No authorization header")

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        raise _unauthenticated("Invalid or expired token")

    return payload
