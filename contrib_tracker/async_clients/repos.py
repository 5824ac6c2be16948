"""Async Repositories resource client."""

from datetime import date
from typing import TYPE_CHECKING

from contrib_tracker.filters import (
    base_query,
    build_search_query,
    is_advanced,
    provider_sort,
    sort_by_name,
)
from contrib_tracker.logging import get_logger
from contrib_tracker.types.filters import (
    ContributorFriendly,
    FilterOptions,
    SortKey,
    SortOrder,
)
from contrib_tracker.types.repos import Repository, RepositorySearchResult

if TYPE_CHECKING:
    from contrib_tracker.async_transport import AsyncHTTPTransport
    from contrib_tracker.enrichment import ContributorFriendlinessChecker

logger = get_logger()


class AsyncReposClient:
    """Async client for organization repository search and details."""

    def __init__(
        self,
        transport: "AsyncHTTPTransport",
        org: str,
        checker: "ContributorFriendlinessChecker | None" = None,
    ) -> None:
        """
        Initialize the async repos client.

        Args:
            transport: Async HTTP transport for making requests
            org: Organization every search is scoped to
            checker: Enrichment pass used by contributor-friendly filters
        """
        self.transport = transport
        self.org = org
        self.checker = checker

    async def search(
        self,
        page: int = 1,
        per_page: int = 30,
        search: str = "",
        sort_by: SortKey | str = SortKey.UPDATED,
        sort_order: SortOrder | str = SortOrder.DESC,
        language: str = "",
    ) -> RepositorySearchResult:
        """
        Search the organization's repositories.

        A name sort is not available from the provider: the page is fetched
        by last update and reordered locally.

        Args:
            page: Page number, 1-based (default: 1)
            per_page: Page size (default: 30)
            search: Free text added to the query (optional)
            sort_by: "stars", "updated" or "name" (default: "updated")
            sort_order: "asc" or "desc" (default: "desc")
            language: Primary language qualifier (optional)

        Returns:
            RepositorySearchResult with the provider's total count
        """
        query = base_query(self.org, search, language)
        return await self._search_page(query, page, per_page, SortKey(sort_by), SortOrder(sort_order))

    async def search_advanced(
        self,
        page: int,
        per_page: int,
        filters: FilterOptions,
        today: date | None = None,
    ) -> RepositorySearchResult:
        """
        Search with the advanced qualifiers and the contributor-friendly pass.

        When a contributor-friendly bucket is selected, ``total_count`` is the
        number of repositories of this page that passed, not the provider's
        total for the query.

        Args:
            page: Page number, 1-based
            per_page: Page size
            filters: Filter options to compile
            today: Reference date for activity qualifiers (default: today)

        Returns:
            RepositorySearchResult
        """
        query = build_search_query(self.org, filters, today)
        result = await self._search_page(query, page, per_page, filters.sort_by, filters.sort_order)

        bucket = filters.contributor_friendly
        if bucket is ContributorFriendly.ALL or self.checker is None:
            return result
        if not self.transport.scheduler.can_make_request():
            logger.warning("Rate limit low, returning %s results unfiltered", bucket.value)
            return result

        filtered = await self.checker.filter(result.items, bucket)
        logger.debug(
            "Contributor filter %s kept %d of %d repositories",
            bucket.value,
            len(filtered),
            len(result.items),
        )
        return RepositorySearchResult(
            total_count=len(filtered),
            items=filtered,
            incomplete_results=result.incomplete_results,
        )

    async def search_filtered(
        self,
        page: int,
        per_page: int,
        filters: FilterOptions | None = None,
    ) -> RepositorySearchResult:
        """Pick the simple or the advanced search path for ``filters``."""
        filters = filters or FilterOptions()
        if is_advanced(filters):
            return await self.search_advanced(page, per_page, filters)
        return await self.search(
            page=page,
            per_page=per_page,
            search=filters.search,
            sort_by=filters.sort_by,
            sort_order=filters.sort_order,
            language=filters.language,
        )

    async def get(self, owner: str, repo: str) -> Repository:
        """
        Get repository information.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            Repository object
        """
        data = await self.transport.get(f"/repos/{owner}/{repo}", what="repository details")
        return Repository.from_api(data)

    async def list_starred(self, username: str, per_page: int = 100, page: int = 1) -> list[Repository]:
        """List repositories starred by a user."""
        data = await self.transport.get(
            f"/users/{username}/starred",
            params={"per_page": per_page, "page": page},
            what="starred repositories",
        )
        return [Repository.from_api(item) for item in data]

    async def _search_page(
        self,
        query: str,
        page: int,
        per_page: int,
        sort_by: SortKey,
        sort_order: SortOrder,
    ) -> RepositorySearchResult:
        order = sort_order if sort_by is not SortKey.NAME else SortOrder.DESC
        data = await self.transport.get(
            "/search/repositories",
            params={
                "q": query,
                "sort": provider_sort(sort_by),
                "order": order.value,
                "page": page,
                "per_page": per_page,
            },
            what="repositories",
        )
        items = [Repository.from_api(item) for item in data.get("items", [])]
        if sort_by is SortKey.NAME:
            items = sort_by_name(items, sort_order)
        return RepositorySearchResult(
            total_count=data.get("total_count", 0),
            items=items,
            incomplete_results=data.get("incomplete_results", False),
        )
