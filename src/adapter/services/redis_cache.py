"""Redis Cache Adapter

redis.asyncio implementation of the cache port. Every Redis or socket
error is caught here: the cache reports itself unavailable and callers
fall back to the database.
"""
import logging
from typing import Optional
from redis.asyncio import Redis
from redis.exceptions import RedisError
from src.app.services.cache import Cache, CacheLookup

logger = logging.getLogger(__name__)


class RedisCache(Cache):
    """Cache backed by a Redis server"""

    def __init__(self, client: Redis):
        """
        Args:
            client: redis.asyncio client created with ``decode_responses=True``
        """
        self.client = client
        self._available = True

    @classmethod
    def from_url(cls, url: str) -> "RedisCache":
        return cls(Redis.from_url(url, encoding="utf-8", decode_responses=True))

    @property
    def available(self) -> bool:
        return self._available

    def _mark_up(self) -> None:
        if not self._available:
            logger.info("Redis cache reachable again; caching resumed")
        self._available = True

    def _mark_down(self, operation: str, key: str, error: Exception) -> None:
        # Log the transition once instead of once per request
        if self._available:
            logger.warning(f"Redis cache unavailable during {operation} {key}: {error}")
        self._available = False

    async def get(self, key: str) -> CacheLookup:
        try:
            value: Optional[str] = await self.client.get(key)
        except (RedisError, OSError) as e:
            self._mark_down("get", key, e)
            return CacheLookup.unavailable()

        self._mark_up()
        if value is None:
            return CacheLookup.miss()
        return CacheLookup.hit(value)

    async def set(self, key: str, value: str, ttl_seconds: int) -> bool:
        try:
            await self.client.set(key, value, ex=ttl_seconds if ttl_seconds > 0 else None)
        except (RedisError, OSError) as e:
            self._mark_down("set", key, e)
            return False

        self._mark_up()
        return True

    async def delete(self, key: str) -> int:
        try:
            removed = await self.client.delete(key)
        except (RedisError, OSError) as e:
            self._mark_down("delete", key, e)
            return 0

        self._mark_up()
        return int(removed)

    async def delete_pattern(self, pattern: str) -> int:
        try:
            keys = [key async for key in self.client.scan_iter(match=pattern)]
            removed = await self.client.delete(*keys) if keys else 0
        except (RedisError, OSError) as e:
            self._mark_down("delete_pattern", pattern, e)
            return 0

        self._mark_up()
        if removed:
            logger.info(f"Invalidated {removed} cache entries for pattern {pattern}")
        return int(removed)

    async def close(self) -> None:
        await self.client.aclose()
