"""Contribution tracker type definitions.

This module exports all data model types used by the package.
"""

from contrib_tracker.types.commits import Commit, CommitSearchResult, Contributor
from contrib_tracker.types.common import Label, User
from contrib_tracker.types.filters import (
    ActivityFilter,
    ContributorFriendly,
    FilterOptions,
    RepositorySize,
    SortKey,
    SortOrder,
)
from contrib_tracker.types.issues import Issue, IssueSearchResult, PullRequest
from contrib_tracker.types.rate_limit import RateLimit, RateLimitResponse
from contrib_tracker.types.repos import Repository, RepositorySearchResult
from contrib_tracker.types.users import (
    UserContributions,
    UserProfile,
    UserRecommendations,
)

__all__ = [
    # Shared
    "User",
    "Label",
    # Repositories
    "Repository",
    "RepositorySearchResult",
    # Issues and pull requests
    "Issue",
    "IssueSearchResult",
    "PullRequest",
    # Commits
    "Commit",
    "CommitSearchResult",
    "Contributor",
    # Users
    "UserProfile",
    "UserContributions",
    "UserRecommendations",
    # Rate limits
    "RateLimit",
    "RateLimitResponse",
    # Filters
    "FilterOptions",
    "SortKey",
    "SortOrder",
    "ActivityFilter",
    "ContributorFriendly",
    "RepositorySize",
]
