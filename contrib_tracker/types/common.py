"""Shared data models and parsing helpers."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a provider ISO-8601 timestamp into an aware UTC datetime."""
    if not value:
        return None
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class User:
    """A GitHub account as embedded in other payloads."""

    id: int
    login: str
    avatar_url: str
    html_url: str
    type: str  # "User", "Bot", "Organization"

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "User":
        return cls(
            id=data["id"],
            login=data["login"],
            avatar_url=data.get("avatar_url", ""),
            html_url=data.get("html_url", ""),
            type=data.get("type", "User"),
        )


@dataclass
class Label:
    """Issue label."""

    id: int
    name: str
    color: str
    description: str | None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Label":
        return cls(
            id=data.get("id", 0),
            name=data["name"],
            color=data.get("color", ""),
            description=data.get("description"),
        )
