"""
In-memory response cache.

Entries expire on their own; a lookup past expiry behaves exactly like a miss
and drops the stale entry. Nothing is persisted.
"""

import asyncio
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from contrib_tracker.logging import get_logger

T = TypeVar("T")

DEFAULT_TTL = 5 * 60.0
ENRICHMENT_TTL = 10 * 60.0
CLEANUP_INTERVAL = 10 * 60.0

logger = get_logger("cache")


@dataclass
class CacheEntry(Generic[T]):
    """A cached value and its lifetime, in clock seconds."""

    key: str
    data: T
    timestamp: float
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now > self.expires_at


@dataclass
class CacheStats:
    """Entry counts, as shown by the filter status panel."""

    total: int
    valid: int
    expired: int


class ResponseCache:
    """Time-to-live keyed store shared by every fetch of a client."""

    def __init__(
        self,
        default_ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the cache.

        Args:
            default_ttl: Lifetime in seconds for entries stored without a ttl
            clock: Time source returning seconds
        """
        self.default_ttl = default_ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry[Any]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """Store ``value`` under ``key``, replacing any previous entry."""
        now = self._clock()
        lifetime = self.default_ttl if ttl is None else ttl
        self._entries[key] = CacheEntry(
            key=key,
            data=value,
            timestamp=now,
            expires_at=now + lifetime,
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Return the fresh value for ``key``, or ``default`` on a miss."""
        entry = self._fresh_entry(key)
        if entry is None:
            return default
        return entry.data

    def has(self, key: str) -> bool:
        return self._fresh_entry(key) is not None

    def clear(self) -> None:
        self._entries.clear()

    def cleanup(self) -> int:
        """
        Evict every expired entry.

        Returns:
            Number of entries removed
        """
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("Evicted %d expired cache entries", len(expired))
        return len(expired)

    def stats(self) -> CacheStats:
        now = self._clock()
        expired = sum(1 for entry in self._entries.values() if entry.is_expired(now))
        return CacheStats(
            total=len(self._entries),
            valid=len(self._entries) - expired,
            expired=expired,
        )

    async def run_periodic_cleanup(self, interval: float = CLEANUP_INTERVAL) -> None:
        """Sweep expired entries every ``interval`` seconds until cancelled."""
        while True:
            await asyncio.sleep(interval)
            self.cleanup()

    def start_cleanup_task(self, interval: float = CLEANUP_INTERVAL) -> "asyncio.Task[None]":
        """
        Schedule the periodic sweep on the running event loop.

        The caller owns the returned task and should cancel it on shutdown.
        """
        return asyncio.get_running_loop().create_task(self.run_periodic_cleanup(interval))

    def _fresh_entry(self, key: str) -> CacheEntry[Any] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            del self._entries[key]
            return None
        return entry
