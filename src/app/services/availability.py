"""Service availability capability

The export dispatcher asks this object whether the queue broker can take
jobs right now. Implementations keep their state explicitly so tests can
substitute or flip it.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class AvailabilityState:
    available: bool
    checked_at: Optional[datetime] = None
    reason: Optional[str] = None


class ServiceAvailability(ABC):
    @abstractmethod
    async def is_available(self) -> bool:
        """Return the (possibly cached) availability of the service"""
        pass

    @abstractmethod
    def mark_unavailable(self, reason: str) -> None:
        """Record a failure observed by a caller"""
        pass

    @property
    @abstractmethod
    def state(self) -> AvailabilityState:
        pass


class StaticAvailability(ServiceAvailability):
    """Availability fixed at construction; used when no broker is configured"""

    def __init__(self, available: bool, reason: Optional[str] = None):
        self._state = AvailabilityState(available=available, reason=reason)

    async def is_available(self) -> bool:
        return self._state.available

    def mark_unavailable(self, reason: str) -> None:
        self._state = AvailabilityState(
            available=False, checked_at=datetime.utcnow(), reason=reason
        )

    @property
    def state(self) -> AvailabilityState:
        return self._state
