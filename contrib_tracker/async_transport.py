"""
Async HTTP Transport for the contribution tracker.

Every request goes through the client's RequestScheduler. Responses feed the
scheduler's rate-limit snapshot and error responses become typed ApiErrors.
"""

import time
from typing import Any

import httpx

from contrib_tracker.config import ACCEPT, USER_AGENT, Settings
from contrib_tracker.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    NetworkError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from contrib_tracker.logging import get_logger, log_http_request, log_http_response
from contrib_tracker.scheduler import RequestScheduler

logger = get_logger()


class AsyncHTTPTransport:
    """
    Async HTTP transport layer for the provider's REST and search API.

    Handles:
    - Fixed Accept/User-Agent headers and the optional bearer token
    - Dispatch through the shared RequestScheduler
    - Rate-limit header bookkeeping
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        settings: Settings,
        scheduler: RequestScheduler,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            settings: Client settings (base URL, token, timeout)
            scheduler: Scheduler that serializes all outbound calls
            transport: Custom httpx transport, e.g. httpx.MockTransport in tests
        """
        self.settings = settings
        self.base_url = settings.base_url.rstrip("/")
        self.scheduler = scheduler

        headers = {"Accept": ACCEPT, "User-Agent": USER_AGENT}
        if settings.token:
            headers["Authorization"] = f"Bearer {settings.token}"
        else:
            logger.warning(
                "No GitHub token found. API requests will be rate limited. "
                "Set GITHUB_TOKEN to increase rate limits."
            )

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=settings.timeout,
            headers=headers,
            transport=transport,
        )

    @property
    def headers(self) -> httpx.Headers:
        return self._client.headers

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        what: str = "data",
    ) -> Any:
        """
        Make a scheduled GET request.

        Args:
            path: API path (e.g., "/search/repositories")
            params: Query parameters
            what: Noun used in the network-failure message ("Failed to fetch <what>")

        Returns:
            Parsed JSON response, or None for 204 No Content

        Raises:
            ApiError: On any non-2xx response, transport failure or empty body
        """

        async def make_request() -> httpx.Response:
            log_http_request("GET", f"{self.base_url}{path}", dict(self._client.headers), params)
            started = time.perf_counter()
            response = await self._client.get(path, params=params)
            self.scheduler.update_from_headers(response.headers)
            log_http_response(
                response.status_code,
                str(response.url),
                remaining=response.headers.get("x-ratelimit-remaining"),
                elapsed_ms=(time.perf_counter() - started) * 1000,
            )
            return response

        try:
            response = await self.scheduler.enqueue(make_request)
        except httpx.HTTPError as e:
            raise NetworkError(f"Failed to fetch {what}") from e

        if not response.is_success:
            raise self._parse_error_response(response)

        if response.status_code == 204:
            return None
        if not response.content:
            raise NetworkError(f"Failed to fetch {what}")

        try:
            return response.json()
        except ValueError as e:
            raise NetworkError(f"Failed to fetch {what}") from e

    def _parse_error_response(self, response: httpx.Response) -> ApiError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate ApiError subclass
        """
        status_code = response.status_code
        try:
            data = response.json()
        except ValueError:
            data = {}

        message = data.get("message") if isinstance(data, dict) else None
        if not message:
            message = f"API error: {status_code}"

        quota_spent = response.headers.get("x-ratelimit-remaining") == "0"

        if status_code == 401:
            return AuthenticationError(message, status_code)
        elif status_code == 429 or (status_code == 403 and quota_spent):
            reset_str = response.headers.get("x-ratelimit-reset")
            reset = int(reset_str) if reset_str and reset_str.isdigit() else None
            return RateLimitedError(message, status_code, reset)
        elif status_code == 403:
            return AuthorizationError(message, status_code)
        elif status_code == 404:
            return NotFoundError(message, status_code)
        elif status_code >= 500:
            return ServerError(message, status_code)
        else:
            return ValidationError(message, status_code)
