"""Commit and contributor data models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from contrib_tracker.types.common import User, parse_timestamp


@dataclass
class Commit:
    """Commit information."""

    sha: str
    message: str
    author_name: str | None
    author_email: str | None
    date: datetime | None
    author: User | None  # None when the commit is not linked to an account
    html_url: str
    repository_full_name: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Commit":
        git_author = data.get("commit", {}).get("author") or {}
        author = data.get("author")
        repository = data.get("repository") or {}
        return cls(
            sha=data["sha"],
            message=data.get("commit", {}).get("message", ""),
            author_name=git_author.get("name"),
            author_email=git_author.get("email"),
            date=parse_timestamp(git_author.get("date")),
            author=User.from_api(author) if author else None,
            html_url=data.get("html_url", ""),
            repository_full_name=repository.get("full_name"),
        )


@dataclass
class CommitSearchResult:
    """One page of commit search results."""

    total_count: int
    items: list[Commit] = field(default_factory=list)


@dataclass
class Contributor:
    """Repository contributor with contribution count."""

    id: int
    login: str
    avatar_url: str
    html_url: str
    contributions: int
    type: str = "User"

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Contributor":
        return cls(
            id=data.get("id", 0),
            login=data.get("login", ""),
            avatar_url=data.get("avatar_url", ""),
            html_url=data.get("html_url", ""),
            contributions=data.get("contributions", 0),
            type=data.get("type", "User"),
        )
