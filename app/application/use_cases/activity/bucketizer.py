"""Filter activity items by category and group them into day buckets."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from app.domain.entities import ACTIVITY_TYPE_SECURITY, ActivityItem
from app.utils import ensure_app_timezone, format_calendar_date, now_in_app_timezone

ACTIVITY_FILTER_ALL = "all"
ACTIVITY_FILTER_ORDER = "order"
ACTIVITY_FILTER_TICKET = "ticket"
ACTIVITY_FILTER_REVIEW = "review"
ACTIVITY_FILTER_SECURITY = "security"

ACTIVITY_FILTERS = (
    ACTIVITY_FILTER_ALL,
    ACTIVITY_FILTER_ORDER,
    ACTIVITY_FILTER_TICKET,
    ACTIVITY_FILTER_REVIEW,
    ACTIVITY_FILTER_SECURITY,
)

BUCKET_TODAY = "Today"
BUCKET_YESTERDAY = "Yesterday"


def normalize_activity_filter(activity_filter: str | None) -> str:
    """Return the canonical filter token or raise ``ValueError``."""

    token = (activity_filter or ACTIVITY_FILTER_ALL).strip().lower()
    if token not in ACTIVITY_FILTERS:
        allowed = ", ".join(ACTIVITY_FILTERS)
        raise ValueError(f"Unknown activity filter '{activity_filter}'. Expected one of: {allowed}")
    return token


def _matches(item: ActivityItem, token: str) -> bool:
    if token == ACTIVITY_FILTER_ALL:
        return True
    if token == ACTIVITY_FILTER_SECURITY:
        return item.type == ACTIVITY_TYPE_SECURITY
    return token in item.type


def filter_activity(
    items: Iterable[ActivityItem], activity_filter: str | None = ACTIVITY_FILTER_ALL
) -> list[ActivityItem]:
    """Keep the items selected by ``activity_filter``, preserving order.

    ``order`` selects both created and updated order entries; ``security``
    selects exactly the security entries.
    """

    token = normalize_activity_filter(activity_filter)
    return [item for item in items if _matches(item, token)]


def format_bucket_label(value: datetime, *, now: datetime) -> str:
    """Return ``Today``, ``Yesterday`` or ``Mon D, YYYY`` for ``value``."""

    localized = ensure_app_timezone(value)
    today = ensure_app_timezone(now).date()
    day = localized.date()
    if day == today:
        return BUCKET_TODAY
    if day == today - timedelta(days=1):
        return BUCKET_YESTERDAY
    return format_calendar_date(localized)


def bucket_activity(
    items: Iterable[ActivityItem],
    activity_filter: str | None = ACTIVITY_FILTER_ALL,
    *,
    now: datetime | None = None,
) -> dict[str, list[ActivityItem]]:
    """Group sorted items into day buckets, in the order they are encountered.

    Items are expected newest first, which keeps ``Today`` ahead of
    ``Yesterday`` and older dates without re-sorting the labels. An empty
    filtered sequence yields an empty mapping.
    """

    reference = now if now is not None else now_in_app_timezone()
    buckets: dict[str, list[ActivityItem]] = {}
    for item in filter_activity(items, activity_filter):
        label = format_bucket_label(item.date, now=reference)
        buckets.setdefault(label, []).append(item)
    return buckets


__all__ = [
    "ACTIVITY_FILTERS",
    "ACTIVITY_FILTER_ALL",
    "ACTIVITY_FILTER_ORDER",
    "ACTIVITY_FILTER_REVIEW",
    "ACTIVITY_FILTER_SECURITY",
    "ACTIVITY_FILTER_TICKET",
    "BUCKET_TODAY",
    "BUCKET_YESTERDAY",
    "bucket_activity",
    "filter_activity",
    "format_bucket_label",
    "normalize_activity_filter",
]
