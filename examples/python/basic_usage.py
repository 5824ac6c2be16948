#!/usr/bin/env python3
"""
Basic contribution tracker usage example.

Set GITHUB_TOKEN for the authenticated quota; without it the provider allows
only a few dozen requests per hour.
Run with: python examples/python/basic_usage.py
"""

import asyncio
import logging

from contrib_tracker import (
    ApiError,
    AsyncGitHubClient,
    FilterOptions,
    build_search_query,
    configure_logging,
    describe_failure,
)

configure_logging(level=logging.INFO)


async def main() -> None:
    print("=== Contribution Tracker Basic Usage Example ===\n")

    # 1. Filter compilation needs no network
    print("1. Compiling advanced filters...")
    filters = FilterOptions.from_dict(
        {
            "search": "snap",
            "language": "Go",
            "minStars": 50,
            "activityFilter": "active",
            "size": "medium",
            "contributorFriendly": "good-first-issues",
        }
    )
    print(f"   Query: {build_search_query('canonical', filters)}\n")

    async with AsyncGitHubClient.from_env() as client:
        try:
            # 2. Simple search
            print("2. Most starred repositories...")
            result = await client.repos.search(per_page=5, sort_by="stars")
            print(f"   {result.total_count} repositories in {client.org}")
            for repo in result.items:
                print(f"   - {repo.full_name} ({repo.stargazers_count} stars)")

            # 3. Advanced search with the good-first-issues pass
            print("\n3. Medium-sized Go repositories with good first issues...")
            result = await client.repos.search_filtered(1, 10, filters)
            for repo in result.items:
                print(f"   - {repo.full_name}")

            # 4. Issues of the first match
            if result.items:
                repo = result.items[0]
                print(f"\n4. Good first issues of {repo.full_name}...")
                for issue in await client.issues.good_first_issues(repo.owner, repo.repo_name, per_page=3):
                    print(f"   #{issue.number} {issue.title}")

            # 5. Remaining quota
            limits = await client.rate_limit.get()
            print(f"\n5. Core quota: {limits.core.remaining}/{limits.core.limit}")
            print(f"   Cache: {client.cache.stats()}")
        except ApiError as e:
            print(f"   Request failed ({describe_failure(e, client.has_token).value}): {e}")


if __name__ == "__main__":
    asyncio.run(main())
