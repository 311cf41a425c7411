from src.adapter.services.local_file_storage import LocalFileStorage
from src.adapter.services.redis_availability import RedisAvailability
from src.adapter.services.redis_cache import RedisCache
from src.adapter.services.rq_export_queue import RqExportQueue
from src.adapter.services.security import BcryptPasswordHasher, JoseTokenIssuer
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "LocalFileStorage",
    "RedisAvailability",
    "RedisCache",
    "RqExportQueue",
    "BcryptPasswordHasher",
    "JoseTokenIssuer",
    "SqlAlchemyUnitOfWork",
]
