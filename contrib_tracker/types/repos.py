"""Repository-related data models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from contrib_tracker.types.common import parse_timestamp


@dataclass
class Repository:
    """Repository snapshot as returned by search and detail endpoints."""

    id: int
    name: str
    full_name: str
    description: str | None
    stargazers_count: int
    forks_count: int
    language: str | None
    updated_at: datetime
    html_url: str
    pushed_at: datetime | None = None

    @property
    def owner(self) -> str:
        return self.full_name.split("/", 1)[0]

    @property
    def repo_name(self) -> str:
        return self.full_name.split("/", 1)[-1]

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Repository":
        return cls(
            id=data["id"],
            name=data["name"],
            full_name=data["full_name"],
            description=data.get("description"),
            stargazers_count=data.get("stargazers_count", 0),
            forks_count=data.get("forks_count", 0),
            language=data.get("language"),
            updated_at=parse_timestamp(data["updated_at"]),
            html_url=data["html_url"],
            pushed_at=parse_timestamp(data.get("pushed_at")),
        )


@dataclass
class RepositorySearchResult:
    """One page of repository search results."""

    total_count: int
    items: list[Repository] = field(default_factory=list)
    incomplete_results: bool = False
