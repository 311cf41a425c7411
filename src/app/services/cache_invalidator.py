"""Cache Invalidator

Every project and task mutation calls one of the hooks below after the
store commit and before returning, so the next read of the affected
keys goes back to the store.
"""
import logging
from src.app.services.cache import Cache
from src.app.services.cache_keys import CacheKeys, is_pattern

logger = logging.getLogger(__name__)


class CacheInvalidator:
    def __init__(self, cache: Cache):
        self.cache = cache

    async def invalidate(self, *keys: str) -> int:
        """
        Delete the given keys. A key containing a wildcard is treated as a
        pattern and every matching key is removed.

        Returns:
            int: Number of cache entries removed (0 when the cache is down)
        """
        removed = 0
        for key in keys:
            try:
                if is_pattern(key):
                    removed += await self.cache.delete_pattern(key)
                else:
                    removed += await self.cache.delete(key)
            except Exception as e:
                # Cache is an optimization only; never fail the business operation
                logger.warning(f"Cache invalidation skipped for {key}: {e}")
        return removed

    async def project_created(self, owner_id: str) -> int:
        return await self.invalidate(CacheKeys.user_projects(owner_id))

    async def project_updated(self, owner_id: str, project_id: str) -> int:
        return await self.invalidate(
            CacheKeys.user_projects(owner_id),
            CacheKeys.project_detail(project_id),
        )

    async def project_deleted(self, owner_id: str, project_id: str) -> int:
        return await self.project_updated(owner_id, project_id)

    async def task_changed(self, owner_id: str, project_id: str) -> int:
        """Task create/update/delete changes the project detail and the task count"""
        return await self.invalidate(
            CacheKeys.project_detail(project_id),
            CacheKeys.user_projects(owner_id),
        )
