"""
Contributor-friendliness enrichment.

After an advanced search, each repository of the page is tested against the
selected contributor-friendly predicate. Results are cached, calls go through
the shared scheduler, and a repository is excluded whenever its predicate
cannot be evaluated.
"""

from collections.abc import Callable, Iterable
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from contrib_tracker.cache import ENRICHMENT_TTL, ResponseCache
from contrib_tracker.logging import get_logger
from contrib_tracker.scheduler import RequestScheduler
from contrib_tracker.types.commits import Commit
from contrib_tracker.types.filters import ContributorFriendly
from contrib_tracker.types.repos import Repository

if TYPE_CHECKING:
    from contrib_tracker.async_clients.commits import AsyncCommitsClient
    from contrib_tracker.async_clients.issues import AsyncIssuesClient

logger = get_logger("enrichment")

ACTIVE_WINDOW = timedelta(days=7)
ACTIVE_MIN_COMMITS = 3
ACTIVE_COMMIT_SAMPLE = 10
MAINTAINED_WINDOW = timedelta(days=30)
MAINTAINED_MIN_STARS = 10
MAINTAINED_MIN_FORKS = 2


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def contributor_cache_key(bucket: ContributorFriendly, repo: Repository) -> str:
    return f"contributor:{bucket.value}:{repo.full_name}"


def commits_cache_key(repo: Repository, since: datetime) -> str:
    return f"commits:{repo.full_name}:{since.date().isoformat()}"


def is_well_maintained(repo: Repository, now: datetime) -> bool:
    """Updated within 30 days, at least 10 stars and 2 forks. Needs no request."""
    return (
        now - repo.updated_at <= MAINTAINED_WINDOW
        and repo.stargazers_count >= MAINTAINED_MIN_STARS
        and repo.forks_count >= MAINTAINED_MIN_FORKS
    )


class ContributorFriendlinessChecker:
    """Filters repositories by a contributor-friendly predicate."""

    def __init__(
        self,
        cache: ResponseCache,
        scheduler: RequestScheduler,
        issues: "AsyncIssuesClient",
        commits: "AsyncCommitsClient",
        ttl: float = ENRICHMENT_TTL,
        now: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.cache = cache
        self.scheduler = scheduler
        self.issues = issues
        self.commits = commits
        self.ttl = ttl
        self._now = now

    async def filter(
        self,
        repos: Iterable[Repository],
        bucket: ContributorFriendly | str,
    ) -> list[Repository]:
        """
        Keep the repositories whose predicate for ``bucket`` holds.

        The page is returned untouched when no bucket is selected or when the
        quota is already low. Repositories are tested one at a time; a cache
        miss found after the quota ran low, or any error, excludes the repo.

        Args:
            repos: Repositories of the fetched page
            bucket: Contributor-friendly bucket to test

        Returns:
            Repositories that passed, in input order
        """
        bucket = ContributorFriendly(bucket)
        repos = list(repos)
        if bucket is ContributorFriendly.ALL:
            return repos
        if not self.scheduler.can_make_request():
            logger.warning("Rate limit low, skipping %s enrichment", bucket.value)
            return repos

        kept: list[Repository] = []
        for repo in repos:
            key = contributor_cache_key(bucket, repo)
            cached = self.cache.get(key)
            if cached is not None:
                if cached:
                    kept.append(repo)
                continue

            if not self.scheduler.can_make_request():
                logger.info("Rate limit low, excluding unchecked repository %s", repo.full_name)
                continue

            try:
                passed = await self.check(repo, bucket)
            except Exception as e:
                logger.warning("Error checking %s for %s: %s", repo.full_name, bucket.value, e)
                continue

            self.cache.set(key, passed, self.ttl)
            if passed:
                kept.append(repo)

        return kept

    async def check(self, repo: Repository, bucket: ContributorFriendly) -> bool:
        """Evaluate one predicate without consulting the result cache."""
        if bucket is ContributorFriendly.GOOD_FIRST_ISSUES:
            issues = await self.issues.good_first_issues(repo.owner, repo.repo_name, per_page=1)
            return len(issues) > 0
        if bucket is ContributorFriendly.HIGHLY_ACTIVE:
            commits = await self.recent_commits(repo)
            return len(commits) >= ACTIVE_MIN_COMMITS
        if bucket is ContributorFriendly.WELL_MAINTAINED:
            return is_well_maintained(repo, self._now())
        raise ValueError(f"No predicate for bucket {bucket.value!r}")

    async def recent_commits(self, repo: Repository) -> list[Commit]:
        """Commits of the last seven days (at most ten), cached separately."""
        since = self._now() - ACTIVE_WINDOW
        key = commits_cache_key(repo, since)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        commits = await self.commits.list(
            repo.owner,
            repo.repo_name,
            since=since,
            per_page=ACTIVE_COMMIT_SAMPLE,
        )
        self.cache.set(key, commits, self.ttl)
        return commits
