"""Contribution tracker exception classes."""

from enum import Enum


class ApiError(Exception):
    """Base exception for every failure surfaced by the API access layer.

    ``status`` carries the provider's HTTP status code when one was received,
    and is ``None`` for transport-level failures.
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        self.message = message
        self.status = status
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, status={self.status!r})"


class ConfigurationError(ApiError):
    """Raised when client configuration is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class NetworkError(ApiError):
    """Raised when no response was received at all."""

    pass


class AuthenticationError(ApiError):
    """Raised on 401: the token is invalid or expired."""

    pass


class AuthorizationError(ApiError):
    """Raised on 403 responses that are not quota related."""

    pass


class RateLimitedError(ApiError):
    """Raised when the provider refuses a request because the quota is spent."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        reset: int | None = None,
    ) -> None:
        super().__init__(message, status)
        self.reset = reset


class NotFoundError(ApiError):
    """Raised when a resource is not found."""

    pass


class ValidationError(ApiError):
    """Raised on 422 and other client errors."""

    pass


class ServerError(ApiError):
    """Raised on server errors (5xx)."""

    pass


class FailureKind(str, Enum):
    """Failure categories a UI needs to tell apart."""

    NO_TOKEN = "no_token"
    INVALID_TOKEN = "invalid_token"
    RATE_LIMITED = "rate_limited"
    TRANSIENT = "transient"
    OTHER = "other"


def describe_failure(error: ApiError, has_token: bool) -> FailureKind:
    """
    Classify an ApiError for user-facing guidance.

    Args:
        error: The error raised by a fetch
        has_token: Whether the client was configured with a token

    Returns:
        The FailureKind matching the error
    """
    if isinstance(error, RateLimitedError):
        # Unauthenticated quota is tiny; the fix is configuration, not waiting.
        return FailureKind.RATE_LIMITED if has_token else FailureKind.NO_TOKEN
    if isinstance(error, AuthenticationError):
        return FailureKind.INVALID_TOKEN if has_token else FailureKind.NO_TOKEN
    if isinstance(error, (NetworkError, ServerError)) or error.status is None:
        return FailureKind.TRANSIENT
    return FailureKind.OTHER
