"""
Request scheduler.

Serializes every outbound call of a client through one FIFO queue, keeps a
minimum spacing between dispatches, and pauses the whole queue until the
provider's reset time once the remaining quota reaches the low-water mark.
"""

import asyncio
import time
from collections import deque
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from contrib_tracker.logging import get_logger, log_rate_limit_wait

T = TypeVar("T")

LOW_WATER_MARK = 5
MIN_DELAY = 0.1
DEFAULT_LIMIT = 5000

logger = get_logger("scheduler")


@dataclass
class RateLimitInfo:
    """Latest quota snapshot reported by the provider."""

    remaining: int
    reset: float  # epoch seconds
    limit: int


class RequestScheduler:
    """
    Single-flight FIFO queue for provider calls.

    States:
    - Idle: queue empty, no drain loop running
    - Draining: a drain loop pops and awaits one call at a time

    The clock must be wall time because reset instants are epoch seconds.
    """

    def __init__(
        self,
        min_delay: float = MIN_DELAY,
        low_water_mark: int = LOW_WATER_MARK,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        """
        Initialize the scheduler.

        Args:
            min_delay: Minimum seconds between two dispatches
            low_water_mark: Remaining quota at or below which the queue pauses
            clock: Time source returning epoch seconds
            sleep: Coroutine function used for every wait
        """
        self.min_delay = min_delay
        self.low_water_mark = low_water_mark
        self._clock = clock
        self._sleep = sleep
        self._queue: deque[tuple[Callable[[], Awaitable[Any]], asyncio.Future[Any]]] = deque()
        self._draining = False
        self._drain_task: asyncio.Task[None] | None = None
        self._rate_limit: RateLimitInfo | None = None
        self._last_dispatch: float | None = None

    @property
    def is_draining(self) -> bool:
        return self._draining

    @property
    def pending(self) -> int:
        """Number of calls waiting for their turn."""
        return len(self._queue)

    @property
    def rate_limit(self) -> RateLimitInfo | None:
        return self._rate_limit

    @property
    def remaining_requests(self) -> int:
        return self._rate_limit.remaining if self._rate_limit else 0

    def enqueue(self, call: Callable[[], Awaitable[T]]) -> "asyncio.Future[T]":
        """
        Queue ``call`` and return a future for its outcome.

        ``call`` is not invoked here; it runs once every call queued before it
        has finished, successfully or not.

        Args:
            call: Zero-argument callable returning an awaitable

        Returns:
            Future resolved with the call's result or exception
        """
        loop = asyncio.get_running_loop()
        future: asyncio.Future[T] = loop.create_future()
        self._queue.append((call, future))

        if not self._draining:
            self._draining = True
            self._drain_task = loop.create_task(self._drain())

        return future

    def update_rate_limit(self, remaining: int, reset: float, limit: int = DEFAULT_LIMIT) -> None:
        """Record the latest quota snapshot."""
        self._rate_limit = RateLimitInfo(remaining=remaining, reset=reset, limit=limit)

    def update_from_headers(self, headers: Mapping[str, str]) -> None:
        """
        Record the snapshot carried by provider response headers.

        Responses without ``x-ratelimit-remaining`` leave the snapshot untouched.
        """
        remaining = headers.get("x-ratelimit-remaining")
        if remaining is None:
            return
        try:
            self.update_rate_limit(
                remaining=int(remaining),
                reset=float(headers.get("x-ratelimit-reset", "0")),
                limit=int(headers.get("x-ratelimit-limit", str(DEFAULT_LIMIT))),
            )
        except ValueError:
            logger.warning("Ignoring malformed rate-limit headers: remaining=%r", remaining)

    def can_make_request(self) -> bool:
        """Return False once the known remaining quota is at the low-water mark."""
        if self._rate_limit is None:
            return True
        return self._rate_limit.remaining > self.low_water_mark

    async def _drain(self) -> None:
        try:
            while self._queue:
                await self._wait_for_quota()
                await self._wait_for_spacing()

                call, future = self._queue.popleft()
                if future.cancelled():
                    continue

                self._last_dispatch = self._clock()
                try:
                    result = await call()
                except Exception as exc:
                    if not future.cancelled():
                        future.set_exception(exc)
                else:
                    if not future.cancelled():
                        future.set_result(result)
        finally:
            self._draining = False

    async def _wait_for_quota(self) -> None:
        info = self._rate_limit
        if info is None or info.remaining > self.low_water_mark:
            return
        wait_time = max(0.0, info.reset - self._clock())
        if wait_time > 0:
            log_rate_limit_wait(info.remaining, wait_time)
            await self._sleep(wait_time)

    async def _wait_for_spacing(self) -> None:
        if self._last_dispatch is None:
            return
        elapsed = self._clock() - self._last_dispatch
        if elapsed < self.min_delay:
            await self._sleep(self.min_delay - elapsed)
