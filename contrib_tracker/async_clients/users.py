"""Async Users resource client.

Profile lookup plus two per-user aggregates built on the provider's
cross-repository search: what a user contributed to the organization, and
where they could contribute next.
"""

from collections import Counter
from typing import TYPE_CHECKING

from contrib_tracker.exceptions import ApiError
from contrib_tracker.logging import get_logger
from contrib_tracker.types.filters import SortKey
from contrib_tracker.types.repos import Repository
from contrib_tracker.types.users import UserContributions, UserProfile, UserRecommendations

if TYPE_CHECKING:
    from contrib_tracker.async_clients.commits import AsyncCommitsClient
    from contrib_tracker.async_clients.issues import AsyncIssuesClient
    from contrib_tracker.async_clients.repos import AsyncReposClient
    from contrib_tracker.async_transport import AsyncHTTPTransport

logger = get_logger()

TOP_LANGUAGES = 3
ISSUES_PER_LANGUAGE = 5
STARRED_REPOS_CHECKED = 3
ISSUES_PER_STARRED_REPO = 3
EXPLORATION_CANDIDATES = 6


class AsyncUsersClient:
    """Async client for user profiles and per-user aggregates."""

    def __init__(
        self,
        transport: "AsyncHTTPTransport",
        org: str,
        repos: "AsyncReposClient",
        issues: "AsyncIssuesClient",
        commits: "AsyncCommitsClient",
    ) -> None:
        self.transport = transport
        self.org = org
        self.repos = repos
        self.issues = issues
        self.commits = commits

    async def get_profile(self, username: str) -> UserProfile:
        """
        Get a user's public profile.

        Args:
            username: GitHub login

        Returns:
            UserProfile object
        """
        data = await self.transport.get(f"/users/{username}", what="user profile")
        return UserProfile.from_api(data)

    async def contributions(
        self,
        username: str,
        recent: int = 10,
        max_repos: int = 10,
    ) -> UserContributions:
        """
        Summarize what a user authored inside the organization.

        Three searches give the commit, pull request and issue totals. The
        repositories touched by the recent commits and pull requests are then
        fetched individually; a repository that cannot be fetched is skipped.

        Args:
            username: GitHub login
            recent: Number of recent commits to return (default: 10)
            max_repos: Maximum repositories to resolve (default: 10)

        Returns:
            UserContributions
        """
        scope = f"author:{username} org:{self.org}"
        commits = await self.commits.search(scope, per_page=recent)
        pulls = await self.issues.search(f"{scope} type:pr", per_page=30, sort="updated")
        issues = await self.issues.search(f"{scope} type:issue", per_page=1)

        touched: dict[str, None] = {}
        for commit in commits.items:
            if commit.repository_full_name:
                touched.setdefault(commit.repository_full_name, None)
        for pull in pulls.items:
            if pull.repository_full_name:
                touched.setdefault(pull.repository_full_name, None)

        repos: list[Repository] = []
        for full_name in list(touched)[:max_repos]:
            owner, _, name = full_name.partition("/")
            try:
                repos.append(await self.repos.get(owner, name))
            except ApiError as e:
                logger.warning("Skipping repository %s for %s: %s", full_name, username, e)

        return UserContributions(
            total_commits=commits.total_count,
            total_prs=pulls.total_count,
            total_issues=issues.total_count,
            repos_contributed_to=repos,
            recent_activity=commits.items,
        )

    async def recommendations(self, username: str) -> UserRecommendations:
        """
        Suggest issues and repositories for a user.

        Every step absorbs its own failures so that one unavailable search
        still leaves the other recommendations. Steps that need requests are
        skipped once the quota is low.

        Args:
            username: GitHub login

        Returns:
            UserRecommendations
        """
        scheduler = self.transport.scheduler
        result = UserRecommendations()

        try:
            contributed = (await self.contributions(username)).repos_contributed_to
        except ApiError as e:
            logger.warning("Could not load contributions of %s: %s", username, e)
            contributed = []

        languages = Counter(repo.language for repo in contributed if repo.language)
        result.top_languages = [language for language, _ in languages.most_common(TOP_LANGUAGES)]

        seen_issue_ids: set[int] = set()
        for language in result.top_languages:
            if not scheduler.can_make_request():
                break
            query = (
                f'org:{self.org} label:"good first issue" state:open type:issue language:{language}'
            )
            try:
                found = await self.issues.search(query, per_page=ISSUES_PER_LANGUAGE, sort="created")
            except ApiError as e:
                logger.warning("Issue search for %s failed: %s", language, e)
                continue
            for issue in found.items:
                if issue.id not in seen_issue_ids:
                    seen_issue_ids.add(issue.id)
                    result.language_based_issues.append(issue)

        starred: list[Repository] = []
        if scheduler.can_make_request():
            try:
                starred = [
                    repo
                    for repo in await self.repos.list_starred(username)
                    if repo.owner.lower() == self.org.lower()
                ]
            except ApiError as e:
                logger.warning("Could not load starred repositories of %s: %s", username, e)

        for repo in starred[:STARRED_REPOS_CHECKED]:
            if not scheduler.can_make_request():
                break
            try:
                issues = await self.issues.good_first_issues(
                    repo.owner, repo.repo_name, per_page=ISSUES_PER_STARRED_REPO
                )
            except ApiError as e:
                logger.warning("Good first issues of %s unavailable: %s", repo.full_name, e)
                continue
            result.starred_repo_issues.extend(issues)

        if scheduler.can_make_request():
            visited = {repo.full_name for repo in contributed} | {repo.full_name for repo in starred}
            try:
                popular = await self.repos.search(per_page=30, sort_by=SortKey.STARS)
            except ApiError as e:
                logger.warning("Could not load exploration candidates: %s", e)
            else:
                result.similar_contributor_repos = [
                    repo for repo in popular.items if repo.full_name not in visited
                ][:EXPLORATION_CANDIDATES]

        return result

