"""Use cases assembling the account activity log and overview feed."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import ActivityItem
from app.infrastructure.repositories import (
    OrderRepository,
    ReviewRepository,
    SecurityLogRepository,
    SupportTicketRepository,
)
from app.utils import now_in_app_timezone

from .aggregator import aggregate_activity
from .bucketizer import ACTIVITY_FILTER_ALL, bucket_activity, filter_activity
from .classifier import DEFAULT_CURRENCY_SYMBOL
from .summary import get_recent_activity

logger = logging.getLogger(__name__)


@dataclass
class ActivityLog:
    """Filtered timeline together with its day buckets."""

    items: list[ActivityItem] = field(default_factory=list)
    buckets: dict[str, list[ActivityItem]] = field(default_factory=dict)


def build_activity_log(
    orders: Iterable[Any] | None = None,
    tickets: Iterable[Any] | None = None,
    reviews: Iterable[Any] | None = None,
    security_logs: Iterable[Any] | None = None,
    *,
    activity_filter: str | None = ACTIVITY_FILTER_ALL,
    now: datetime | None = None,
    update_threshold: timedelta | None = None,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> ActivityLog:
    """Run the full pipeline over in-memory collections.

    Raises ``ValueError`` when ``activity_filter`` is not a known token.
    """

    reference = now if now is not None else now_in_app_timezone()
    timeline = aggregate_activity(
        orders,
        tickets,
        reviews,
        security_logs,
        update_threshold=update_threshold,
        currency_symbol=currency_symbol,
    )
    items = filter_activity(timeline, activity_filter)
    buckets = bucket_activity(items, ACTIVITY_FILTER_ALL, now=reference)
    logger.debug(
        "Built activity log with %d of %d items in %d buckets",
        len(items),
        len(timeline),
        len(buckets),
    )
    return ActivityLog(items=items, buckets=buckets)


def get_user_activity_log(
    session: Session,
    user_id: str,
    *,
    activity_filter: str | None = ACTIVITY_FILTER_ALL,
    now: datetime | None = None,
) -> ActivityLog:
    """Load the stored records of ``user_id`` and build their activity log."""

    settings = get_settings()
    return build_activity_log(
        OrderRepository(session).list_for_user(user_id),
        SupportTicketRepository(session).list_for_user(user_id),
        ReviewRepository(session).list_for_user(user_id),
        SecurityLogRepository(session).list_for_user(user_id),
        activity_filter=activity_filter,
        now=now,
        update_threshold=timedelta(minutes=settings.order_update_threshold_minutes),
        currency_symbol=settings.currency_symbol,
    )


def get_user_recent_activity(
    session: Session, user_id: str, *, limit: int | None = None
) -> list[ActivityItem]:
    """Return the overview feed for ``user_id`` from stored records."""

    settings = get_settings()
    return get_recent_activity(
        OrderRepository(session).list_for_user(user_id),
        SupportTicketRepository(session).list_for_user(user_id),
        ReviewRepository(session).list_for_user(user_id),
        limit=settings.recent_activity_limit if limit is None else limit,
        currency_symbol=settings.currency_symbol,
    )


__all__ = [
    "ActivityLog",
    "build_activity_log",
    "get_user_activity_log",
    "get_user_recent_activity",
]
