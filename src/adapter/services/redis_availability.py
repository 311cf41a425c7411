"""Redis availability probe

Tracks whether the Redis broker behind the export queue is reachable.
A probe result is reused for ``recheck_seconds`` so request handlers do
not ping Redis on every call.
"""
import asyncio
import logging
from datetime import datetime, timedelta
from typing import Callable, Optional
from redis import Redis
from redis.exceptions import RedisError
from src.app.services.availability import AvailabilityState, ServiceAvailability

logger = logging.getLogger(__name__)


class RedisAvailability(ServiceAvailability):
    def __init__(
        self,
        connection: Redis,
        recheck_seconds: float = 5,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.connection = connection
        self.recheck_seconds = recheck_seconds
        self.clock = clock
        self._state = AvailabilityState(available=False)

    @property
    def state(self) -> AvailabilityState:
        return self._state

    def _is_fresh(self) -> bool:
        checked_at = self._state.checked_at
        if checked_at is None:
            return False
        return self.clock() - checked_at < timedelta(seconds=self.recheck_seconds)

    def _ping(self) -> Optional[str]:
        """Returns None when Redis answers, otherwise the failure reason"""
        try:
            self.connection.ping()
        except (RedisError, OSError) as e:
            return str(e) or type(e).__name__
        return None

    async def is_available(self) -> bool:
        if self._is_fresh():
            return self._state.available

        reason = await asyncio.to_thread(self._ping)
        first_probe = self._state.checked_at is None
        was_available = self._state.available
        self._state = AvailabilityState(
            available=reason is None, checked_at=self.clock(), reason=reason
        )

        if reason is not None and (was_available or first_probe):
            logger.warning(f"Redis unavailable, exports will run synchronously: {reason}")
        elif reason is None and not was_available and not first_probe:
            logger.info("Redis available, exports will be queued")
        return self._state.available

    def mark_unavailable(self, reason: str) -> None:
        if self._state.available:
            logger.warning(f"Redis marked unavailable: {reason}")
        self._state = AvailabilityState(
            available=False, checked_at=self.clock(), reason=reason
        )
