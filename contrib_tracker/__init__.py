"""Canonical Contribution Tracker - rate-limit aware GitHub access layer."""

from contrib_tracker.async_client import AsyncGitHubClient
from contrib_tracker.cache import CacheStats, ResponseCache
from contrib_tracker.config import Settings
from contrib_tracker.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    FailureKind,
    NetworkError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
    describe_failure,
)
from contrib_tracker.filters import build_search_query, is_advanced, sort_by_name
from contrib_tracker.logging import configure_logging, get_logger
from contrib_tracker.scheduler import RateLimitInfo, RequestScheduler
from contrib_tracker.types import (
    ActivityFilter,
    ContributorFriendly,
    FilterOptions,
    RepositorySize,
    SortKey,
    SortOrder,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Client
    "AsyncGitHubClient",
    "Settings",
    # Scheduling and caching
    "RequestScheduler",
    "RateLimitInfo",
    "ResponseCache",
    "CacheStats",
    # Filters
    "FilterOptions",
    "SortKey",
    "SortOrder",
    "ActivityFilter",
    "ContributorFriendly",
    "RepositorySize",
    "build_search_query",
    "is_advanced",
    "sort_by_name",
    # Exceptions
    "ApiError",
    "NetworkError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "ConfigurationError",
    "FailureKind",
    "describe_failure",
    # Logging
    "configure_logging",
    "get_logger",
]
