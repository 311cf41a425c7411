"""Cache port

Key-value cache used as a non-authoritative read optimization. Lookups
report one of three outcomes so callers can tell a plain miss (read the
store, then repopulate) from an unreachable cache (read the store, skip
the cache entirely). Implementations never raise on cache failures.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CacheStatus(str, Enum):
    HIT = "hit"
    MISS = "miss"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class CacheLookup:
    status: CacheStatus
    value: Optional[str] = None

    @property
    def is_hit(self) -> bool:
        return self.status == CacheStatus.HIT

    @property
    def is_unavailable(self) -> bool:
        return self.status == CacheStatus.UNAVAILABLE

    @classmethod
    def hit(cls, value: str) -> "CacheLookup":
        return cls(CacheStatus.HIT, value)

    @classmethod
    def miss(cls) -> "CacheLookup":
        return cls(CacheStatus.MISS)

    @classmethod
    def unavailable(cls) -> "CacheLookup":
        return cls(CacheStatus.UNAVAILABLE)


class Cache(ABC):
    """Interface for the key-value cache"""

    @property
    @abstractmethod
    def available(self) -> bool:
        """Whether the last cache operation reached the cache service"""
        pass

    @abstractmethod
    async def get(self, key: str) -> CacheLookup:
        """Read a serialized value"""
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: int) -> bool:
        """Store a serialized value with an expiry; False if not stored"""
        pass

    @abstractmethod
    async def delete(self, key: str) -> int:
        """Delete one key; returns the number of keys removed"""
        pass

    @abstractmethod
    async def delete_pattern(self, pattern: str) -> int:
        """Delete every key matching a glob pattern"""
        pass


class DisabledCache(Cache):
    """Cache used when caching is switched off in configuration"""

    @property
    def available(self) -> bool:
        return False

    async def get(self, key: str) -> CacheLookup:
        return CacheLookup.unavailable()

    async def set(self, key: str, value: str, ttl_seconds: int) -> bool:
        return False

    async def delete(self, key: str) -> int:
        return 0

    async def delete_pattern(self, pattern: str) -> int:
        return 0
