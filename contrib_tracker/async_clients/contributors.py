"""Async Contributors resource client."""

from typing import TYPE_CHECKING

from contrib_tracker.types.commits import Contributor

if TYPE_CHECKING:
    from contrib_tracker.async_transport import AsyncHTTPTransport


class AsyncContributorsClient:
    """Async client for repository contributors."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def list(self, owner: str, repo: str, per_page: int = 30, page: int = 1) -> list[Contributor]:
        """List contributors, highest contribution count first."""
        data = await self.transport.get(
            f"/repos/{owner}/{repo}/contributors",
            params={"per_page": per_page, "page": page},
            what="contributors",
        )
        # An empty repository answers 204 with no body
        return [Contributor.from_api(item) for item in data or []]
