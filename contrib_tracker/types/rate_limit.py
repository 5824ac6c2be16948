"""Rate-limit data models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass
class RateLimit:
    """Quota snapshot for one resource category."""

    limit: int
    remaining: int
    used: int
    reset: int  # epoch seconds

    @property
    def reset_at(self) -> datetime:
        return datetime.fromtimestamp(self.reset, tz=timezone.utc)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "RateLimit":
        return cls(
            limit=data.get("limit", 0),
            remaining=data.get("remaining", 0),
            used=data.get("used", 0),
            reset=data.get("reset", 0),
        )


@dataclass
class RateLimitResponse:
    """All resource categories reported by the rate-limit endpoint."""

    rate: RateLimit  # legacy field, same as resources["core"]
    resources: dict[str, RateLimit] = field(default_factory=dict)

    @property
    def core(self) -> RateLimit:
        return self.resources.get("core", self.rate)

    @property
    def search(self) -> RateLimit | None:
        return self.resources.get("search")

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "RateLimitResponse":
        resources = {
            name: RateLimit.from_api(value)
            for name, value in data.get("resources", {}).items()
        }
        rate = data.get("rate") or data.get("resources", {}).get("core", {})
        return cls(rate=RateLimit.from_api(rate), resources=resources)
