"""
Search query compiler for repository filters.

Turns FilterOptions into the provider's search qualifier syntax. Everything
here is pure; ``today`` is a parameter so dates are reproducible.
"""

import calendar
from collections.abc import Iterable
from datetime import date, timedelta

from contrib_tracker.types.filters import (
    ActivityFilter,
    ContributorFriendly,
    FilterOptions,
    RepositorySize,
    SortKey,
    SortOrder,
)
from contrib_tracker.types.repos import Repository

SIZE_QUALIFIERS = {
    RepositorySize.SMALL: "stars:<100",
    RepositorySize.MEDIUM: "stars:100..1000",
    RepositorySize.LARGE: "stars:>1000",
}

RECENT_ACTIVITY_DAYS = 7


def subtract_months(day: date, months: int) -> date:
    """Step back whole calendar months, clamping to the target month's last day."""
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def is_advanced(filters: FilterOptions) -> bool:
    """True when any filter beyond search/language/sort is active."""
    return (
        filters.activity is not ActivityFilter.ALL
        or filters.contributor_friendly is not ContributorFriendly.ALL
        or filters.repository_size is not RepositorySize.ALL
        or filters.min_stars > 0
        or filters.has_recent_activity
    )


def base_query(org: str, search: str = "", language: str = "") -> str:
    """Build ``org:<org>`` plus the optional free text and language qualifier."""
    query = f"org:{org}"
    if search.strip():
        query += f" {search.strip()}"
    if language.strip():
        query += f" language:{language.strip()}"
    return query


def activity_qualifier(activity: ActivityFilter, today: date) -> str | None:
    if activity is ActivityFilter.RECENT:
        return f"pushed:>{subtract_months(today, 1).isoformat()}"
    if activity is ActivityFilter.ACTIVE:
        return f"pushed:>{subtract_months(today, 6).isoformat()}"
    if activity is ActivityFilter.STALE:
        return f"pushed:<{subtract_months(today, 12).isoformat()}"
    return None


def build_search_query(org: str, filters: FilterOptions, today: date | None = None) -> str:
    """
    Compile filters into a provider search query.

    Qualifiers are appended in a fixed order: minimum stars, size bucket,
    activity bucket, then the seven-day recent-activity flag. The activity
    bucket and the recent flag are independent and may both appear.

    Args:
        org: Organization the search is scoped to
        filters: Filter options selected by the user
        today: Reference date for pushed: qualifiers (default: date.today())

    Returns:
        Space-joined query string
    """
    today = today or date.today()
    parts = [base_query(org, filters.search, filters.language)]

    if filters.min_stars > 0:
        parts.append(f"stars:>={filters.min_stars}")

    size = SIZE_QUALIFIERS.get(filters.repository_size)
    if size:
        parts.append(size)

    activity = activity_qualifier(filters.activity, today)
    if activity:
        parts.append(activity)

    if filters.has_recent_activity:
        since = today - timedelta(days=RECENT_ACTIVITY_DAYS)
        parts.append(f"pushed:>{since.isoformat()}")

    return " ".join(parts)


def provider_sort(sort_by: SortKey | str) -> str:
    """Map a sort key onto one the provider supports; it cannot sort by name."""
    return SortKey.STARS.value if SortKey(sort_by) is SortKey.STARS else SortKey.UPDATED.value


def sort_by_name(repos: Iterable[Repository], order: SortOrder | str = SortOrder.ASC) -> list[Repository]:
    """Sort repositories by name, case-sensitively."""
    return sorted(repos, key=lambda repo: repo.name, reverse=SortOrder(order) is SortOrder.DESC)
