"""Contribution tracker async resource clients."""

from contrib_tracker.async_clients.commits import AsyncCommitsClient
from contrib_tracker.async_clients.contributors import AsyncContributorsClient
from contrib_tracker.async_clients.issues import AsyncIssuesClient
from contrib_tracker.async_clients.pulls import AsyncPullsClient
from contrib_tracker.async_clients.rate_limit import AsyncRateLimitClient
from contrib_tracker.async_clients.repos import AsyncReposClient
from contrib_tracker.async_clients.users import AsyncUsersClient

__all__ = [
    "AsyncReposClient",
    "AsyncIssuesClient",
    "AsyncPullsClient",
    "AsyncCommitsClient",
    "AsyncContributorsClient",
    "AsyncRateLimitClient",
    "AsyncUsersClient",
]
