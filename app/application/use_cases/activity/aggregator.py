"""Merge classified activity items into one reverse-chronological sequence."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import timedelta
from operator import attrgetter
from typing import Any

from app.domain.entities import ActivityItem

from .classifier import DEFAULT_CURRENCY_SYMBOL, classify_activity
from .normalizer import normalize_records


def sort_activity(items: Iterable[ActivityItem]) -> list[ActivityItem]:
    """Return a new list sorted newest first.

    ``sorted`` is stable with ``reverse=True`` as well, so items sharing a
    timestamp keep the order the normalizer emitted them in.
    """

    return sorted(items, key=attrgetter("date"), reverse=True)


def aggregate_activity(
    orders: Iterable[Any] | None = None,
    tickets: Iterable[Any] | None = None,
    reviews: Iterable[Any] | None = None,
    security_logs: Iterable[Any] | None = None,
    *,
    update_threshold: timedelta | None = None,
    include_order_updates: bool = True,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> list[ActivityItem]:
    """Normalize, classify and sort every source collection."""

    items = normalize_records(
        orders,
        tickets,
        reviews,
        security_logs,
        update_threshold=update_threshold,
        include_order_updates=include_order_updates,
    )
    return sort_activity(
        classify_activity(item, currency_symbol=currency_symbol) for item in items
    )


__all__ = ["aggregate_activity", "sort_activity"]
