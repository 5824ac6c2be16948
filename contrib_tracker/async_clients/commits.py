"""Async Commits resource client."""

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from contrib_tracker.types.commits import Commit, CommitSearchResult

if TYPE_CHECKING:
    from contrib_tracker.async_transport import AsyncHTTPTransport


def format_timestamp(value: datetime | str) -> str:
    """Render a bound as ISO-8601 with a Z suffix."""
    if isinstance(value, str):
        return value
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.replace(microsecond=0).isoformat() + "Z"


class AsyncCommitsClient:
    """Async client for commit history and commit search."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def list(
        self,
        owner: str,
        repo: str,
        since: datetime | str | None = None,
        until: datetime | str | None = None,
        per_page: int = 30,
        page: int = 1,
    ) -> list[Commit]:
        """
        List commits on the default branch, newest first.

        Args:
            owner: Repository owner
            repo: Repository name
            since: Only commits after this instant (optional)
            until: Only commits before this instant (optional)
            per_page: Page size (default: 30)
            page: Page number, 1-based (default: 1)

        Returns:
            List of Commit objects
        """
        params: dict[str, str | int] = {"per_page": per_page, "page": page}
        if since is not None:
            params["since"] = format_timestamp(since)
        if until is not None:
            params["until"] = format_timestamp(until)

        data = await self.transport.get(
            f"/repos/{owner}/{repo}/commits",
            params=params,
            what="commits",
        )
        return [Commit.from_api(item) for item in data]

    async def search(
        self,
        query: str,
        per_page: int = 30,
        page: int = 1,
        sort: str | None = "author-date",
        order: str = "desc",
    ) -> CommitSearchResult:
        """Search commits across repositories."""
        params: dict[str, str | int] = {"q": query, "per_page": per_page, "page": page}
        if sort:
            params["sort"] = sort
            params["order"] = order

        data = await self.transport.get("/search/commits", params=params, what="commits")
        return CommitSearchResult(
            total_count=data.get("total_count", 0),
            items=[Commit.from_api(item) for item in data.get("items", [])],
        )
