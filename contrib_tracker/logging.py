"""
Contribution tracker logging utilities.

Named loggers live under ``contrib_tracker``: ``http`` traces provider
requests, ``scheduler`` reports rate-limit pauses, ``enrichment`` reports
repositories dropped from a contributor-friendly page. Bearer tokens never
reach the log output.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

_sdk_logger = logging.getLogger("contrib_tracker")
_http_logger = logging.getLogger("contrib_tracker.http")
_scheduler_logger = logging.getLogger("contrib_tracker.scheduler")

REDACTED = "[REDACTED]"

_TOKEN_PATTERNS = [
    # Authorization header values
    (re.compile(r"(Bearer|token)\s+[A-Za-z0-9_\-\.]+", re.IGNORECASE), rf"\1 {REDACTED}"),
    # Personal access tokens, classic and fine-grained
    (re.compile(r"\b(ghp|gho|ghu|ghs|ghr)_[A-Za-z0-9]{20,}\b"), "[TOKEN_REDACTED]"),
    (re.compile(r"\bgithub_pat_[A-Za-z0-9_]{20,}\b"), "[TOKEN_REDACTED]"),
    # token="..." style assignments
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), rf"\1: {REDACTED}"),
]

_SENSITIVE_KEYS = frozenset({"authorization", "token", "secret", "password", "api_key"})


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    scheduler_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Attach a handler to the package logger and set per-area levels.

    Args:
        level: Level of the package logger and the default for every area
        http_level: Level for request/response tracing (DEBUG shows every call)
        scheduler_level: Level for rate-limit pauses
        handler: Handler to attach (default: StreamHandler to stderr)
        format_string: Record format (default: time, logger, level, message)

    Example:
        ```python
        import logging
        from contrib_tracker.logging import configure_logging

        # Quiet package, but trace every request sent to the provider
        configure_logging(level=logging.WARNING, http_level=logging.DEBUG)
        ```
    """
    handler = handler or logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(format_string or "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    _sdk_logger.setLevel(level)
    _sdk_logger.addHandler(handler)
    _http_logger.setLevel(level if http_level is None else http_level)
    _scheduler_logger.setLevel(level if scheduler_level is None else scheduler_level)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``contrib_tracker.<name>``, or the package logger when name is None."""
    if name is None:
        return _sdk_logger
    return logging.getLogger(f"contrib_tracker.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask access tokens in a string.

    Args:
        text: Text that may contain a token

    Returns:
        Text with every token replaced by a placeholder
    """
    for pattern, replacement in _TOKEN_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


def safe_log_dict(data: Mapping[str, Any], sensitive_keys: frozenset[str] | set[str] | None = None) -> dict[str, Any]:
    """
    Copy a mapping with the values of sensitive keys masked.

    A key is sensitive when its lowercase form contains one of
    ``sensitive_keys``, so ``github_token`` is masked along with ``token``.
    Nested mappings are masked recursively.

    Args:
        data: Headers, query parameters or any other mapping
        sensitive_keys: Key fragments to mask (default: authorization, token, secret, password, api_key)

    Returns:
        New dictionary; ``data`` is left unchanged
    """
    keys = _SENSITIVE_KEYS if sensitive_keys is None else sensitive_keys

    def masked(key: str, value: Any) -> Any:
        if any(fragment in key.lower() for fragment in keys):
            return REDACTED
        if isinstance(value, Mapping):
            return safe_log_dict(value, keys)
        return value

    return {key: masked(key, value) for key, value in data.items()}


def log_http_request(
    method: str,
    url: str,
    headers: Mapping[str, str] | None = None,
    params: Mapping[str, Any] | None = None,
) -> None:
    """Trace an outgoing request at DEBUG level, token masked."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    line = f"{method} {mask_sensitive_data(url)}"
    if headers:
        line += f" | headers={safe_log_dict(headers)}"
    if params:
        line += f" | params={safe_log_dict(params)}"
    _http_logger.debug(line)


def log_http_response(
    status_code: int,
    url: str,
    remaining: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """
    Trace a provider response at DEBUG level.

    Args:
        status_code: HTTP status code
        url: Request URL
        remaining: Value of the x-ratelimit-remaining header, when present
        elapsed_ms: Request duration in milliseconds
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    line = f"Response {status_code} from {mask_sensitive_data(url)}"
    if elapsed_ms is not None:
        line += f" | elapsed={elapsed_ms:.2f}ms"
    if remaining is not None:
        line += f" | ratelimit_remaining={remaining}"
    _http_logger.debug(line)


def log_rate_limit_wait(remaining: int, wait_seconds: float) -> None:
    """Warn that the request queue is paused until the quota resets."""
    _scheduler_logger.warning(
        "Rate limit almost exceeded (%d left). Waiting %.1fs until reset.",
        remaining,
        wait_seconds,
    )


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
    "log_rate_limit_wait",
]
