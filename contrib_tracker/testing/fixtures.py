"""
Payload factories and pytest fixtures.

The factories build provider-shaped JSON dictionaries, ready to be served by
StubProvider.
"""

from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from typing import Any

import pytest
import pytest_asyncio

from contrib_tracker.async_client import AsyncGitHubClient
from contrib_tracker.cache import ResponseCache
from contrib_tracker.scheduler import RequestScheduler
from contrib_tracker.testing.mock import FakeClock, StubProvider


def iso(dt: datetime) -> str:
    """Format a datetime the way the provider does."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")


def create_user_payload(login: str = "testuser", user_id: int = 1) -> dict[str, Any]:
    return {
        "id": user_id,
        "login": login,
        "avatar_url": f"https://avatars.githubusercontent.com/u/{user_id}",
        "html_url": f"https://github.com/{login}",
        "type": "User",
    }


def create_repository_payload(
    name: str = "test-repo",
    owner: str = "canonical",
    repo_id: int = 1,
    stars: int = 150,
    forks: int = 25,
    language: str | None = "Python",
    updated_at: datetime | None = None,
    description: str | None = "A test repository",
) -> dict[str, Any]:
    """Create a repository payload as returned by search and detail endpoints."""
    updated = iso(updated_at or datetime.now(timezone.utc))
    return {
        "id": repo_id,
        "name": name,
        "full_name": f"{owner}/{name}",
        "description": description,
        "stargazers_count": stars,
        "forks_count": forks,
        "language": language,
        "updated_at": updated,
        "pushed_at": updated,
        "html_url": f"https://github.com/{owner}/{name}",
    }


def create_search_payload(items: list[dict[str, Any]], total_count: int | None = None) -> dict[str, Any]:
    return {
        "total_count": len(items) if total_count is None else total_count,
        "incomplete_results": False,
        "items": items,
    }


def create_issue_payload(
    issue_id: int = 1,
    number: int = 123,
    title: str = "Test issue",
    labels: list[str] | None = None,
    pull_request: bool = False,
    repo_full_name: str = "canonical/test-repo",
) -> dict[str, Any]:
    """Create an issue payload; ``pull_request=True`` adds the PR marker."""
    payload: dict[str, Any] = {
        "id": issue_id,
        "number": number,
        "title": title,
        "body": "Test description",
        "state": "open",
        "user": create_user_payload(),
        "labels": [
            {"id": index, "name": name, "color": "7057ff", "description": None}
            for index, name in enumerate(labels or [], start=1)
        ],
        "assignees": [],
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-02T00:00:00Z",
        "closed_at": None,
        "html_url": f"https://github.com/{repo_full_name}/issues/{number}",
        "repository_url": f"https://api.github.com/repos/{repo_full_name}",
        "comments": 0,
    }
    if pull_request:
        payload["pull_request"] = {
            "url": f"https://api.github.com/repos/{repo_full_name}/pulls/{number}",
        }
    return payload


def create_pull_request_payload(pr_id: int = 1, number: int = 456, merged: bool = False) -> dict[str, Any]:
    return {
        "id": pr_id,
        "number": number,
        "title": "Test PR",
        "body": "Test PR description",
        "state": "closed" if merged else "open",
        "user": create_user_payload(),
        "labels": [],
        "assignees": [],
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
        "closed_at": "2024-01-03T00:00:00Z" if merged else None,
        "merged_at": "2024-01-03T00:00:00Z" if merged else None,
        "html_url": f"https://github.com/canonical/test-repo/pull/{number}",
        "draft": False,
    }


def create_commit_payload(
    sha: str = "abc123",
    message: str = "Test commit",
    author_login: str | None = "testuser",
    repo_full_name: str | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "sha": sha,
        "commit": {
            "message": message,
            "author": {
                "name": "Test User",
                "email": "test@example.com",
                "date": "2024-01-01T00:00:00Z",
            },
        },
        "author": create_user_payload(author_login) if author_login else None,
        "html_url": f"https://github.com/canonical/test-repo/commit/{sha}",
    }
    if repo_full_name:
        payload["repository"] = {"full_name": repo_full_name}
    return payload


def create_contributor_payload(login: str = "contributor1", contributions: int = 42) -> dict[str, Any]:
    return {**create_user_payload(login), "contributions": contributions}


def create_profile_payload(login: str = "testuser") -> dict[str, Any]:
    return {
        **create_user_payload(login),
        "name": "Test User",
        "bio": "Writes code",
        "blog": "",
        "company": "Canonical",
        "location": "London",
        "public_repos": 12,
        "followers": 34,
        "following": 5,
        "created_at": "2015-06-01T00:00:00Z",
    }


def create_rate_limit_payload(remaining: int = 4999, reset: int = 1_700_003_600) -> dict[str, Any]:
    core = {"limit": 5000, "remaining": remaining, "reset": reset, "used": 5000 - remaining}
    search = {"limit": 30, "remaining": 30, "reset": reset, "used": 0}
    return {"resources": {"core": core, "search": search}, "rate": core}


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def stub_provider() -> StubProvider:
    """Provide an empty StubProvider."""
    return StubProvider()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest_asyncio.fixture
async def github_client(
    stub_provider: StubProvider, fake_clock: FakeClock
) -> AsyncGenerator[AsyncGitHubClient, None]:
    """
    Provide a client wired to ``stub_provider`` with no dispatch spacing.

    The cache runs on ``fake_clock``; advance it to expire entries.

    Example:
        ```python
        async def test_search(github_client, stub_provider):
            stub_provider.add("/search/repositories", json=create_search_payload([]))
            result = await github_client.repos.search()
            assert stub_provider.was_called("/search/repositories")
        ```
    """
    async with AsyncGitHubClient(
        token="test-token",
        scheduler=RequestScheduler(min_delay=0),
        cache=ResponseCache(clock=fake_clock),
        transport=stub_provider.transport,
    ) as client:
        yield client
