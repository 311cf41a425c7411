"""Cache-aside helpers shared by the project read use cases"""
import logging
from typing import Optional, Tuple, Type, TypeVar
from pydantic import BaseModel, ValidationError
from src.app.services.cache import Cache, CacheLookup

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


async def read_cached(cache: Cache, key: str, model: Type[M]) -> Tuple[CacheLookup, Optional[M]]:
    """
    Look up a cached DTO.

    An entry that no longer decodes into ``model`` is reported as a miss
    so the caller rebuilds and overwrites it.
    """
    lookup = await cache.get(key)
    if not lookup.is_hit:
        return lookup, None

    try:
        return lookup, model.model_validate_json(lookup.value)
    except ValidationError:
        logger.warning(f"Discarding undecodable cache entry {key}")
        return CacheLookup.miss(), None


async def store_cached(cache: Cache, lookup: CacheLookup, key: str, value: BaseModel, ttl_seconds: int) -> None:
    """Repopulate after a miss; skipped entirely while the cache is unreachable"""
    if lookup.is_unavailable:
        return
    await cache.set(key, value.model_dump_json(), ttl_seconds)
