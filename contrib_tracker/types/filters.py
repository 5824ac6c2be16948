"""Repository filter options."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SortKey(str, Enum):
    STARS = "stars"
    UPDATED = "updated"
    NAME = "name"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ActivityFilter(str, Enum):
    ALL = "all"
    RECENT = "recent"  # pushed within the last month
    ACTIVE = "active"  # pushed within the last six months
    STALE = "stale"  # not pushed for a year


class ContributorFriendly(str, Enum):
    ALL = "all"
    GOOD_FIRST_ISSUES = "good-first-issues"
    HIGHLY_ACTIVE = "highly-active"
    WELL_MAINTAINED = "well-maintained"


class RepositorySize(str, Enum):
    ALL = "all"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass
class FilterOptions:
    """
    User-selected repository filters.

    The default instance applies no constraint and sorts by last update,
    newest first.
    """

    search: str = ""
    language: str = ""
    sort_by: SortKey = SortKey.UPDATED
    sort_order: SortOrder = SortOrder.DESC
    activity: ActivityFilter = ActivityFilter.ALL
    contributor_friendly: ContributorFriendly = ContributorFriendly.ALL
    repository_size: RepositorySize = RepositorySize.ALL
    min_stars: int = 0
    has_recent_activity: bool = False

    def __post_init__(self) -> None:
        self.sort_by = SortKey(self.sort_by)
        self.sort_order = SortOrder(self.sort_order)
        self.activity = ActivityFilter(self.activity)
        self.contributor_friendly = ContributorFriendly(self.contributor_friendly)
        self.repository_size = RepositorySize(self.repository_size)
        if self.min_stars < 0:
            raise ValueError("min_stars must not be negative")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FilterOptions":
        """Build options from the dashboard's camelCase filter object."""
        return cls(
            search=data.get("search", ""),
            language=data.get("language", ""),
            sort_by=data.get("sortBy", SortKey.UPDATED),
            sort_order=data.get("sortOrder", SortOrder.DESC),
            activity=data.get("activityFilter", ActivityFilter.ALL),
            contributor_friendly=data.get("contributorFriendly", ContributorFriendly.ALL),
            repository_size=data.get("repositorySize", RepositorySize.ALL),
            min_stars=data.get("minStars", 0),
            has_recent_activity=data.get("hasRecentActivity", False),
        )
