"""Convert orders, tickets, reviews and security logs into activity items."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import replace
from datetime import datetime, timedelta
from hashlib import sha256
from types import MappingProxyType
from typing import Any

from app.domain.entities import (
    ACTIVITY_TYPE_ORDER_CREATED,
    ACTIVITY_TYPE_ORDER_UPDATED,
    ACTIVITY_TYPE_REVIEW,
    ACTIVITY_TYPE_SECURITY,
    ACTIVITY_TYPE_TICKET,
    ActivityItem,
    SourceRef,
)
from app.utils import parse_timestamp

logger = logging.getLogger(__name__)

ORDER_UPDATE_THRESHOLD = timedelta(hours=1)

SOURCE_KIND_ORDER = "order"
SOURCE_KIND_TICKET = "ticket"
SOURCE_KIND_REVIEW = "review"
SOURCE_KIND_SECURITY_LOG = "security_log"

SECTION_ORDERS = "orders"
SECTION_SUPPORT = "support"
SECTION_REVIEWS = "reviews"

_ID_PREFIXES = {
    ACTIVITY_TYPE_ORDER_CREATED: "ord-cr",
    ACTIVITY_TYPE_ORDER_UPDATED: "ord-up",
    ACTIVITY_TYPE_TICKET: "tkt",
    ACTIVITY_TYPE_REVIEW: "rev",
    ACTIVITY_TYPE_SECURITY: "sys",
}

# Source payloads come either as entities or as raw API mappings (camelCase).
_FIELD_ALIASES = {
    "created_at": ("created_at", "createdAt"),
    "updated_at": ("updated_at", "updatedAt"),
    "total_amount": ("total_amount", "totalAmount"),
}


def _field(record: Any, name: str) -> Any:
    for candidate in _FIELD_ALIASES.get(name, (name,)):
        if isinstance(record, Mapping):
            value = record.get(candidate)
        else:
            value = getattr(record, candidate, None)
        if value is not None:
            return value
    return None


def _record_id(record: Any) -> str | None:
    raw_id = _field(record, "id")
    if raw_id is None:
        return None
    text = str(raw_id).strip()
    return text or None


def _synthetic_log_id(created_at: datetime, action: Any, description: Any) -> str:
    """Return a stable digest for a security log that arrived without an id."""

    composite = "|".join(
        (
            ACTIVITY_TYPE_SECURITY,
            created_at.isoformat(),
            "" if action is None else str(action),
            "" if description is None else str(description),
        )
    )
    return sha256(composite.encode("utf-8")).hexdigest()[:16]


def _item_id(activity_type: str, source_id: str) -> str:
    return f"{_ID_PREFIXES[activity_type]}-{source_id}"


def _iter_orders(
    orders: Iterable[Any],
    *,
    update_threshold: timedelta,
    include_order_updates: bool,
) -> Iterator[ActivityItem]:
    for order in orders:
        order_id = _record_id(order)
        created_at = parse_timestamp(_field(order, "created_at"))
        if order_id is None or created_at is None:
            logger.warning(
                "Skipping order %r: missing id or creation date", order_id
            )
            continue

        context = MappingProxyType(
            {
                "order_id": order_id,
                "status": _field(order, "status"),
                "total_amount": _field(order, "total_amount"),
            }
        )
        source_ref = SourceRef(SOURCE_KIND_ORDER, order_id, SECTION_ORDERS)
        yield ActivityItem(
            id=_item_id(ACTIVITY_TYPE_ORDER_CREATED, order_id),
            type=ACTIVITY_TYPE_ORDER_CREATED,
            date=created_at,
            source_ref=source_ref,
            context=context,
        )

        if not include_order_updates:
            continue
        updated_at = parse_timestamp(_field(order, "updated_at"))
        if updated_at is None or updated_at - created_at <= update_threshold:
            continue
        yield ActivityItem(
            id=_item_id(ACTIVITY_TYPE_ORDER_UPDATED, order_id),
            type=ACTIVITY_TYPE_ORDER_UPDATED,
            date=updated_at,
            source_ref=source_ref,
            context=context,
        )


def _iter_tickets(tickets: Iterable[Any]) -> Iterator[ActivityItem]:
    for ticket in tickets:
        ticket_id = _record_id(ticket)
        created_at = parse_timestamp(_field(ticket, "created_at"))
        if ticket_id is None or created_at is None:
            logger.warning(
                "Skipping support ticket %r: missing id or creation date", ticket_id
            )
            continue
        yield ActivityItem(
            id=_item_id(ACTIVITY_TYPE_TICKET, ticket_id),
            type=ACTIVITY_TYPE_TICKET,
            date=created_at,
            source_ref=SourceRef(SOURCE_KIND_TICKET, ticket_id, SECTION_SUPPORT),
            context=MappingProxyType(
                {
                    "status": _field(ticket, "status"),
                    "subject": _field(ticket, "subject"),
                }
            ),
        )


def _iter_reviews(reviews: Iterable[Any]) -> Iterator[ActivityItem]:
    for review in reviews:
        review_id = _record_id(review)
        created_at = parse_timestamp(_field(review, "created_at"))
        if review_id is None or created_at is None:
            logger.warning(
                "Skipping review %r: missing id or creation date", review_id
            )
            continue
        yield ActivityItem(
            id=_item_id(ACTIVITY_TYPE_REVIEW, review_id),
            type=ACTIVITY_TYPE_REVIEW,
            date=created_at,
            source_ref=SourceRef(SOURCE_KIND_REVIEW, review_id, SECTION_REVIEWS),
            context=MappingProxyType({}),
        )


def _iter_security_logs(security_logs: Iterable[Any]) -> Iterator[ActivityItem]:
    for log in security_logs:
        created_at = parse_timestamp(_field(log, "created_at"))
        if created_at is None:
            logger.warning(
                "Skipping security log %r: missing creation date", _record_id(log)
            )
            continue
        action = _field(log, "action")
        description = _field(log, "description")
        log_id = _record_id(log)
        key = log_id or _synthetic_log_id(created_at, action, description)
        yield ActivityItem(
            id=_item_id(ACTIVITY_TYPE_SECURITY, key),
            type=ACTIVITY_TYPE_SECURITY,
            date=created_at,
            source_ref=SourceRef(SOURCE_KIND_SECURITY_LOG, log_id),
            context=MappingProxyType(
                {"action": action, "description": description}
            ),
        )


def _with_unique_ids(items: Iterable[ActivityItem]) -> Iterator[ActivityItem]:
    """Suffix repeated ids with ``-2``, ``-3``... in emission order.

    A suffix already taken by another item is skipped, so every emitted id is
    distinct even when a source id itself ends in ``-<n>``.
    """

    emitted: set[str] = set()
    next_suffix: dict[str, int] = {}
    for item in items:
        if item.id not in emitted:
            emitted.add(item.id)
            yield item
            continue
        suffix = next_suffix.get(item.id, 2)
        while f"{item.id}-{suffix}" in emitted:
            suffix += 1
        next_suffix[item.id] = suffix + 1
        unique_id = f"{item.id}-{suffix}"
        emitted.add(unique_id)
        yield replace(item, id=unique_id)


def normalize_records(
    orders: Iterable[Any] | None = None,
    tickets: Iterable[Any] | None = None,
    reviews: Iterable[Any] | None = None,
    security_logs: Iterable[Any] | None = None,
    *,
    update_threshold: timedelta | None = None,
    include_order_updates: bool = True,
) -> list[ActivityItem]:
    """Return unclassified activity items for every usable source record.

    Sources are processed in a fixed order (orders, tickets, reviews, security
    logs) so that later stable sorting breaks timestamp ties predictably. An
    order yields an ``order_updated`` item only when it was last touched more
    than ``update_threshold`` after being created. Records without a usable
    creation date (or, except for security logs, without an id) are skipped.
    """

    threshold = ORDER_UPDATE_THRESHOLD if update_threshold is None else update_threshold
    items = list(
        _with_unique_ids(
            [
                *_iter_orders(
                    orders or (),
                    update_threshold=threshold,
                    include_order_updates=include_order_updates,
                ),
                *_iter_tickets(tickets or ()),
                *_iter_reviews(reviews or ()),
                *_iter_security_logs(security_logs or ()),
            ]
        )
    )
    logger.debug("Normalized %d activity items", len(items))
    return items


__all__ = [
    "ORDER_UPDATE_THRESHOLD",
    "SECTION_ORDERS",
    "SECTION_REVIEWS",
    "SECTION_SUPPORT",
    "SOURCE_KIND_ORDER",
    "SOURCE_KIND_REVIEW",
    "SOURCE_KIND_SECURITY_LOG",
    "SOURCE_KIND_TICKET",
    "normalize_records",
]
