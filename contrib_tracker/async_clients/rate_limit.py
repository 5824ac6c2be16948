"""Async Rate Limit resource client."""

from typing import TYPE_CHECKING

from contrib_tracker.types.rate_limit import RateLimitResponse

if TYPE_CHECKING:
    from contrib_tracker.async_transport import AsyncHTTPTransport


class AsyncRateLimitClient:
    """Async client for the rate-limit endpoint."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def get(self) -> RateLimitResponse:
        """
        Get quota snapshots for every resource category.

        The core snapshot is also recorded on the scheduler.

        Returns:
            RateLimitResponse with one RateLimit per category
        """
        data = await self.transport.get("/rate_limit", what="rate limit information")
        response = RateLimitResponse.from_api(data)
        core = response.core
        self.transport.scheduler.update_rate_limit(
            remaining=core.remaining,
            reset=core.reset,
            limit=core.limit,
        )
        return response
