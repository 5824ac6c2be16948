"""User profile and per-user aggregate data models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from contrib_tracker.types.commits import Commit
from contrib_tracker.types.common import parse_timestamp
from contrib_tracker.types.issues import Issue
from contrib_tracker.types.repos import Repository


@dataclass
class UserProfile:
    """Public profile of a GitHub user."""

    id: int
    login: str
    avatar_url: str
    html_url: str
    name: str | None
    bio: str | None
    blog: str | None
    company: str | None
    location: str | None
    public_repos: int
    followers: int
    following: int
    created_at: datetime

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "UserProfile":
        return cls(
            id=data["id"],
            login=data["login"],
            avatar_url=data.get("avatar_url", ""),
            html_url=data.get("html_url", ""),
            name=data.get("name"),
            bio=data.get("bio"),
            blog=data.get("blog") or None,
            company=data.get("company"),
            location=data.get("location"),
            public_repos=data.get("public_repos", 0),
            followers=data.get("followers", 0),
            following=data.get("following", 0),
            created_at=parse_timestamp(data["created_at"]),
        )


@dataclass
class UserContributions:
    """What a user has authored inside the organization."""

    total_commits: int
    total_prs: int
    total_issues: int
    repos_contributed_to: list[Repository] = field(default_factory=list)
    recent_activity: list[Commit] = field(default_factory=list)


@dataclass
class UserRecommendations:
    """Suggested places for a user to contribute next."""

    language_based_issues: list[Issue] = field(default_factory=list)
    starred_repo_issues: list[Issue] = field(default_factory=list)
    similar_contributor_repos: list[Repository] = field(default_factory=list)
    top_languages: list[str] = field(default_factory=list)
