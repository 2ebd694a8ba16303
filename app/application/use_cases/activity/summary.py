"""Bounded recent-activity projection for the account overview."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from app.domain.entities import ActivityItem

from .aggregator import aggregate_activity
from .classifier import DEFAULT_CURRENCY_SYMBOL

RECENT_ACTIVITY_LIMIT = 4


def get_recent_activity(
    orders: Iterable[Any] | None = None,
    tickets: Iterable[Any] | None = None,
    reviews: Iterable[Any] | None = None,
    *,
    limit: int = RECENT_ACTIVITY_LIMIT,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> list[ActivityItem]:
    """Return the ``limit`` most recent order, ticket and review items.

    Security logs and order status updates are left out; the result is a
    prefix of the full timeline restricted to the same item kinds.
    """

    if limit <= 0:
        return []
    items = aggregate_activity(
        orders,
        tickets,
        reviews,
        None,
        include_order_updates=False,
        currency_symbol=currency_symbol,
    )
    return items[:limit]


__all__ = ["RECENT_ACTIVITY_LIMIT", "get_recent_activity"]
