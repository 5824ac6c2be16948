"""Issue and pull request data models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from contrib_tracker.types.common import Label, User, parse_timestamp


@dataclass
class Issue:
    """Issue information."""

    id: int
    number: int
    title: str
    body: str | None
    state: str  # "open" or "closed"
    user: User | None
    labels: list[Label]
    assignees: list[User]
    created_at: datetime
    updated_at: datetime
    closed_at: datetime | None
    html_url: str
    comments: int = 0
    repository_url: str | None = None

    @property
    def repository_full_name(self) -> str | None:
        """``owner/name`` of the repository, derived from ``repository_url``."""
        if not self.repository_url:
            return None
        parts = self.repository_url.rstrip("/").split("/")
        return "/".join(parts[-2:])

    @staticmethod
    def is_pull_request(data: dict[str, Any]) -> bool:
        """The issues endpoint returns pull requests too, marked by this key."""
        return "pull_request" in data

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Issue":
        user = data.get("user")
        return cls(
            id=data["id"],
            number=data["number"],
            title=data["title"],
            body=data.get("body"),
            state=data["state"],
            user=User.from_api(user) if user else None,
            labels=[Label.from_api(label) for label in data.get("labels", [])],
            assignees=[User.from_api(a) for a in data.get("assignees") or []],
            created_at=parse_timestamp(data["created_at"]),
            updated_at=parse_timestamp(data["updated_at"]),
            closed_at=parse_timestamp(data.get("closed_at")),
            html_url=data["html_url"],
            comments=data.get("comments", 0),
            repository_url=data.get("repository_url"),
        )


@dataclass
class PullRequest:
    """Pull request information."""

    id: int
    number: int
    title: str
    body: str | None
    state: str  # "open" or "closed"
    user: User | None
    labels: list[Label]
    assignees: list[User]
    created_at: datetime
    updated_at: datetime
    closed_at: datetime | None
    merged_at: datetime | None
    html_url: str
    draft: bool = False
    # Only the single-PR endpoint reports change sizes
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None
    comments: int = 0

    @property
    def merged(self) -> bool:
        return self.merged_at is not None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "PullRequest":
        user = data.get("user")
        return cls(
            id=data["id"],
            number=data["number"],
            title=data["title"],
            body=data.get("body"),
            state=data["state"],
            user=User.from_api(user) if user else None,
            labels=[Label.from_api(label) for label in data.get("labels", [])],
            assignees=[User.from_api(a) for a in data.get("assignees") or []],
            created_at=parse_timestamp(data["created_at"]),
            updated_at=parse_timestamp(data["updated_at"]),
            closed_at=parse_timestamp(data.get("closed_at")),
            merged_at=parse_timestamp(data.get("merged_at")),
            html_url=data["html_url"],
            draft=data.get("draft", False),
            additions=data.get("additions"),
            deletions=data.get("deletions"),
            changed_files=data.get("changed_files"),
            comments=data.get("comments", 0),
        )


@dataclass
class IssueSearchResult:
    """One page of issue search results."""

    total_count: int
    items: list[Issue] = field(default_factory=list)
