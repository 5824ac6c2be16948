"""Async Pull Requests resource client."""

from typing import TYPE_CHECKING

from contrib_tracker.types.issues import PullRequest

if TYPE_CHECKING:
    from contrib_tracker.async_transport import AsyncHTTPTransport


class AsyncPullsClient:
    """Async client for pull request listing."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async pulls client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def list(
        self,
        owner: str,
        repo: str,
        state: str = "open",
        sort: str = "created",
        direction: str = "desc",
        per_page: int = 30,
        page: int = 1,
    ) -> list[PullRequest]:
        """
        List pull requests of a repository.

        Args:
            owner: Repository owner
            repo: Repository name
            state: "open", "closed" or "all" (default: "open")
            sort: "created", "updated", "popularity" or "long-running"
            direction: "asc" or "desc" (default: "desc")
            per_page: Page size (default: 30)
            page: Page number, 1-based (default: 1)

        Returns:
            List of PullRequest objects
        """
        params: dict[str, str | int] = {
            "state": state,
            "sort": sort,
            "direction": direction,
            "per_page": per_page,
            "page": page,
        }
        data = await self.transport.get(
            f"/repos/{owner}/{repo}/pulls",
            params=params,
            what="pull requests",
        )
        return [PullRequest.from_api(item) for item in data]
