"""Async Issues resource client."""

from typing import TYPE_CHECKING

from contrib_tracker.types.issues import Issue, IssueSearchResult

if TYPE_CHECKING:
    from contrib_tracker.async_transport import AsyncHTTPTransport

GOOD_FIRST_ISSUE_LABEL = "good first issue"


class AsyncIssuesClient:
    """Async client for issue listing and issue search."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async issues client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def list(
        self,
        owner: str,
        repo: str,
        state: str = "open",
        labels: list[str] | None = None,
        sort: str = "created",
        direction: str = "desc",
        per_page: int = 30,
        page: int = 1,
    ) -> list[Issue]:
        """
        List issues of a repository.

        The provider's issues endpoint also returns pull requests; those are
        dropped here.

        Args:
            owner: Repository owner
            repo: Repository name
            state: "open", "closed" or "all" (default: "open")
            labels: Labels that must all be present (optional)
            sort: "created", "updated" or "comments" (default: "created")
            direction: "asc" or "desc" (default: "desc")
            per_page: Page size (default: 30)
            page: Page number, 1-based (default: 1)

        Returns:
            List of Issue objects
        """
        params: dict[str, str | int] = {
            "state": state,
            "sort": sort,
            "direction": direction,
            "per_page": per_page,
            "page": page,
        }
        if labels:
            params["labels"] = ",".join(labels)

        data = await self.transport.get(
            f"/repos/{owner}/{repo}/issues",
            params=params,
            what="issues",
        )
        return [Issue.from_api(item) for item in data if not Issue.is_pull_request(item)]

    async def good_first_issues(self, owner: str, repo: str, per_page: int = 10) -> "list[Issue]":
        """Open issues labelled exactly "good first issue", newest first."""
        return await self.list(
            owner,
            repo,
            state="open",
            labels=[GOOD_FIRST_ISSUE_LABEL],
            sort="created",
            direction="desc",
            per_page=per_page,
        )

    async def search(
        self,
        query: str,
        per_page: int = 30,
        page: int = 1,
        sort: str | None = None,
        order: str = "desc",
    ) -> IssueSearchResult:
        """
        Search issues and pull requests across repositories.

        Args:
            query: Provider search query (e.g. "org:canonical type:issue")
            per_page: Page size (default: 30)
            page: Page number, 1-based (default: 1)
            sort: "created", "updated" or "comments"; None keeps best match
            order: "asc" or "desc" (default: "desc")

        Returns:
            IssueSearchResult with the total count and one page of items
        """
        params: dict[str, str | int] = {"q": query, "per_page": per_page, "page": page}
        if sort:
            params["sort"] = sort
            params["order"] = order

        data = await self.transport.get("/search/issues", params=params, what="issues")
        return IssueSearchResult(
            total_count=data.get("total_count", 0),
            items=[Issue.from_api(item) for item in data.get("items", [])],
        )
