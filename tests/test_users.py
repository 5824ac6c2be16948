"""
Tests for user profiles, contributions and recommendations.

Feature: user-insights
"""

import pytest

from contrib_tracker.async_client import AsyncGitHubClient
from contrib_tracker.testing import (
    StubProvider,
    create_commit_payload,
    create_issue_payload,
    create_profile_payload,
    create_repository_payload,
    create_search_payload,
)


def stub_contributions(provider: StubProvider) -> None:
    provider.add(
        "/search/commits",
        json=create_search_payload(
            [
                create_commit_payload(sha="1", repo_full_name="canonical/a"),
                create_commit_payload(sha="2", repo_full_name="canonical/c"),
                create_commit_payload(sha="3", repo_full_name="canonical/a"),
            ],
            total_count=120,
        ),
    )
    # Pull request search first, then the issue search
    provider.add(
        "/search/issues",
        json=create_search_payload(
            [create_issue_payload(issue_id=10, pull_request=True, repo_full_name="canonical/b")],
            total_count=7,
        ),
    )
    provider.add("/search/issues", json=create_search_payload([], total_count=4))
    provider.add("/repos/canonical/a", json=create_repository_payload(name="a", repo_id=1, language="Go"))
    provider.add("/repos/canonical/b", json=create_repository_payload(name="b", repo_id=2, language="Python"))


@pytest.mark.asyncio
async def test_get_profile(github_client: AsyncGitHubClient, stub_provider: StubProvider) -> None:
    stub_provider.add("/users/alice", json=create_profile_payload("alice"))

    profile = await github_client.users.get_profile("alice")

    assert profile.login == "alice"
    assert profile.public_repos == 12
    assert profile.created_at.year == 2015


@pytest.mark.asyncio
async def test_contributions(github_client: AsyncGitHubClient, stub_provider: StubProvider) -> None:
    stub_contributions(stub_provider)

    result = await github_client.users.contributions("alice")

    assert result.total_commits == 120
    assert result.total_prs == 7
    assert result.total_issues == 4
    assert len(result.recent_activity) == 3
    # canonical/c answers 404 and is skipped
    assert [repo.full_name for repo in result.repos_contributed_to] == ["canonical/a", "canonical/b"]
    assert stub_provider.call_count("/repos/canonical/a") == 1

    pr_search, issue_search = stub_provider.calls_to("/search/issues")
    assert pr_search.query == "author:alice org:canonical type:pr"
    assert pr_search.params["sort"] == "updated"
    assert issue_search.query == "author:alice org:canonical type:issue"
    assert issue_search.params["per_page"] == "1"
    assert stub_provider.calls_to("/search/commits")[0].query == "author:alice org:canonical"


@pytest.mark.asyncio
async def test_recommendations(github_client: AsyncGitHubClient, stub_provider: StubProvider) -> None:
    stub_contributions(stub_provider)
    # Served for every language search
    stub_provider.add(
        "/search/issues",
        json=create_search_payload([create_issue_payload(issue_id=50, labels=["good first issue"])]),
    )
    stub_provider.add(
        "/users/alice/starred",
        json=[
            create_repository_payload(name="star", repo_id=3),
            create_repository_payload(name="elsewhere", owner="someone", repo_id=4),
        ],
    )
    stub_provider.add("/repos/canonical/star/issues", json=[create_issue_payload(issue_id=77)])
    stub_provider.add(
        "/search/repositories",
        json=create_search_payload(
            [create_repository_payload(name="a", repo_id=1), create_repository_payload(name="star", repo_id=3)]
            + [create_repository_payload(name=f"new{i}", repo_id=100 + i) for i in range(8)]
        ),
    )

    result = await github_client.users.recommendations("alice")

    assert result.top_languages == ["Go", "Python"]
    assert [issue.id for issue in result.language_based_issues] == [50]
    assert [issue.id for issue in result.starred_repo_issues] == [77]
    assert not stub_provider.was_called("/repos/someone/elsewhere/issues")
    assert [repo.name for repo in result.similar_contributor_repos] == [f"new{i}" for i in range(6)]

    language_searches = stub_provider.calls_to("/search/issues")[2:]
    assert [request.query for request in language_searches] == [
        'org:canonical label:"good first issue" state:open type:issue language:Go',
        'org:canonical label:"good first issue" state:open type:issue language:Python',
    ]
    assert stub_provider.calls_to("/search/repositories")[0].params["sort"] == "stars"


@pytest.mark.asyncio
async def test_recommendations_absorb_failures(
    github_client: AsyncGitHubClient, stub_provider: StubProvider
) -> None:
    stub_provider.add("/search/commits", json={"message": "Validation Failed"}, status=422)
    stub_provider.add("/users/alice/starred", json={"message": "Server Error"}, status=500)
    stub_provider.add(
        "/search/repositories",
        json=create_search_payload([create_repository_payload(name="popular")]),
    )

    result = await github_client.users.recommendations("alice")

    assert result.top_languages == []
    assert result.language_based_issues == []
    assert result.starred_repo_issues == []
    assert [repo.name for repo in result.similar_contributor_repos] == ["popular"]


@pytest.mark.asyncio
async def test_recommendations_stop_when_quota_low() -> None:
    provider = StubProvider(rate_limit_remaining=2, rate_limit_reset=0)
    provider.add("/search/commits", json=create_search_payload([]))
    provider.add("/search/issues", json=create_search_payload([]))
    client = AsyncGitHubClient(token="t", transport=provider.transport)
    client.scheduler.min_delay = 0

    result = await client.users.recommendations("alice")

    assert result.similar_contributor_repos == []
    assert not provider.was_called("/users/alice/starred")
    assert not provider.was_called("/search/repositories")
    await client.close()
