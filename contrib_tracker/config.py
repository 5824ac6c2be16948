"""Client configuration."""

import os
from dataclasses import dataclass

from contrib_tracker.cache import DEFAULT_TTL, ENRICHMENT_TTL
from contrib_tracker.exceptions import ConfigurationError
from contrib_tracker.scheduler import LOW_WATER_MARK, MIN_DELAY

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_ORG = "canonical"
DEFAULT_TIMEOUT = 30.0
USER_AGENT = "Canonical-Contribution-Tracker"
ACCEPT = "application/vnd.github.v3+json"

# Value shipped in .env.example; it means "not configured".
PLACEHOLDER_TOKEN = "your_github_token_here"

TOKEN_ENV_VARS = ("GITHUB_TOKEN", "VITE_GITHUB_TOKEN")


def normalize_token(token: str | None) -> str | None:
    """Return the token, or None when it is empty or the documented placeholder."""
    if token is None:
        return None
    token = token.strip()
    if not token or token == PLACEHOLDER_TOKEN:
        return None
    return token


@dataclass
class Settings:
    """Settings shared by the transport, scheduler and cache."""

    token: str | None = None
    org: str = DEFAULT_ORG
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    min_delay: float = MIN_DELAY
    low_water_mark: int = LOW_WATER_MARK
    cache_ttl: float = DEFAULT_TTL
    enrichment_ttl: float = ENRICHMENT_TTL

    def __post_init__(self) -> None:
        self.token = normalize_token(self.token)
        if not self.org:
            raise ConfigurationError("Organization name must not be empty")
        if self.min_delay < 0:
            raise ConfigurationError("min_delay must not be negative")
        if self.low_water_mark < 0:
            raise ConfigurationError("low_water_mark must not be negative")

    @property
    def has_token(self) -> bool:
        return self.token is not None

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load settings from environment variables.

        Environment variables:
            GITHUB_TOKEN: Personal access token (optional; VITE_GITHUB_TOKEN is also read)
            GITHUB_ORG: Organization to scope searches to (optional, default: canonical)
            GITHUB_API_URL: Provider base URL (optional, default: https://api.github.com)

        Returns:
            Settings instance
        """
        token = None
        for name in TOKEN_ENV_VARS:
            token = normalize_token(os.environ.get(name))
            if token:
                break

        return cls(
            token=token,
            org=os.environ.get("GITHUB_ORG", DEFAULT_ORG),
            base_url=os.environ.get("GITHUB_API_URL", DEFAULT_BASE_URL),
        )
