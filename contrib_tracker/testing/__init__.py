"""Contribution tracker testing utilities.

Provides a stub provider, a fake clock and payload factories for testing
code that uses the contribution tracker.
"""

from contrib_tracker.testing.fixtures import (
    create_commit_payload,
    create_contributor_payload,
    create_issue_payload,
    create_profile_payload,
    create_pull_request_payload,
    create_rate_limit_payload,
    create_repository_payload,
    create_search_payload,
    create_user_payload,
)
from contrib_tracker.testing.mock import FakeClock, RecordedRequest, StubProvider, StubResponse

__all__ = [
    # Test doubles
    "StubProvider",
    "StubResponse",
    "RecordedRequest",
    "FakeClock",
    # Payload factories
    "create_user_payload",
    "create_repository_payload",
    "create_search_payload",
    "create_issue_payload",
    "create_pull_request_payload",
    "create_commit_payload",
    "create_contributor_payload",
    "create_profile_payload",
    "create_rate_limit_payload",
]
