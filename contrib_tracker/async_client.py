"""
Contribution tracker async client.

Provides the async interface to the provider's REST and search API for one
organization.
"""

import asyncio
import contextlib
from typing import Any

import httpx

from contrib_tracker.async_clients import (
    AsyncCommitsClient,
    AsyncContributorsClient,
    AsyncIssuesClient,
    AsyncPullsClient,
    AsyncRateLimitClient,
    AsyncReposClient,
    AsyncUsersClient,
)
from contrib_tracker.async_transport import AsyncHTTPTransport
from contrib_tracker.cache import CLEANUP_INTERVAL, ResponseCache
from contrib_tracker.config import DEFAULT_BASE_URL, DEFAULT_ORG, DEFAULT_TIMEOUT, Settings
from contrib_tracker.enrichment import ContributorFriendlinessChecker
from contrib_tracker.scheduler import RequestScheduler


class AsyncGitHubClient:
    """
    Async client for an organization's repositories, issues and contributors.

    Aggregates all async resource clients. Every request of every resource
    client goes through one RequestScheduler, and derived results share one
    ResponseCache. Create one client per process and pass it around.

    Example:
        ```python
        import asyncio
        from contrib_tracker import AsyncGitHubClient, FilterOptions

        async def main():
            async with AsyncGitHubClient.from_env() as client:
                result = await client.repos.search(search="snap")
                issues = await client.issues.good_first_issues("canonical", "snapcraft")

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        token: str | None = None,
        org: str = DEFAULT_ORG,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        settings: Settings | None = None,
        scheduler: RequestScheduler | None = None,
        cache: ResponseCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        cleanup_interval: float = CLEANUP_INTERVAL,
    ) -> None:
        """
        Initialize the async client.

        Args:
            token: Personal access token; empty or placeholder means anonymous
            org: Organization searches are scoped to (default: canonical)
            base_url: Provider base URL (default: https://api.github.com)
            timeout: HTTP timeout in seconds (default: 30.0)
            settings: Full settings; overrides token, org, base_url and timeout
            scheduler: Scheduler to share with other clients (optional)
            cache: Cache to share with other clients (optional)
            transport: Custom httpx transport, e.g. httpx.MockTransport (optional)
            cleanup_interval: Seconds between expired-entry sweeps of the cache (default: 600)
        """
        self.settings = settings or Settings(token=token, org=org, base_url=base_url, timeout=timeout)
        self.org = self.settings.org

        if scheduler is None:
            scheduler = RequestScheduler(
                min_delay=self.settings.min_delay,
                low_water_mark=self.settings.low_water_mark,
            )
        if cache is None:
            cache = ResponseCache(default_ttl=self.settings.cache_ttl)
        self.scheduler = scheduler
        self.cache = cache
        self.cleanup_interval = cleanup_interval
        self._cleanup_task: "asyncio.Task[None] | None" = None

        self._transport = AsyncHTTPTransport(self.settings, self.scheduler, transport=transport)

        self.issues = AsyncIssuesClient(self._transport)
        self.pulls = AsyncPullsClient(self._transport)
        self.commits = AsyncCommitsClient(self._transport)
        self.contributors = AsyncContributorsClient(self._transport)
        self.rate_limit = AsyncRateLimitClient(self._transport)
        self.checker = ContributorFriendlinessChecker(
            self.cache,
            self.scheduler,
            self.issues,
            self.commits,
            ttl=self.settings.enrichment_ttl,
        )
        self.repos = AsyncReposClient(self._transport, self.org, self.checker)
        self.users = AsyncUsersClient(self._transport, self.org, self.repos, self.issues, self.commits)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "AsyncGitHubClient":
        """
        Create an async client from environment variables.

        See Settings.from_env for the variables read. Keyword arguments are
        passed to the constructor (scheduler, cache, transport).

        Returns:
            Configured AsyncGitHubClient instance
        """
        return cls(settings=Settings.from_env(), **kwargs)

    @property
    def has_token(self) -> bool:
        return self.settings.has_token

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport (for advanced use cases)."""
        return self._transport

    def start_cache_cleanup(self) -> "asyncio.Task[None]":
        """
        Start sweeping expired cache entries every ``cleanup_interval`` seconds.

        Called on context manager entry. Idempotent; the task is cancelled by close().
        """
        if self._cleanup_task is None or self._cleanup_task.done():
            self._cleanup_task = self.cache.start_cleanup_task(self.cleanup_interval)
        return self._cleanup_task

    async def close(self) -> None:
        """Stop the cache sweep and close the HTTP client."""
        if self._cleanup_task is not None:
            self._cleanup_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._cleanup_task
            self._cleanup_task = None
        await self._transport.close()

    async def __aenter__(self) -> "AsyncGitHubClient":
        """Async context manager entry; starts the cache sweep."""
        self.start_cache_cleanup()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()
