"""Domain entity describing an item of the account activity timeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping

ACTIVITY_TYPE_ORDER_CREATED = "order_created"
ACTIVITY_TYPE_ORDER_UPDATED = "order_updated"
ACTIVITY_TYPE_TICKET = "ticket"
ACTIVITY_TYPE_REVIEW = "review"
ACTIVITY_TYPE_SECURITY = "security"

ACTIVITY_TYPES = (
    ACTIVITY_TYPE_ORDER_CREATED,
    ACTIVITY_TYPE_ORDER_UPDATED,
    ACTIVITY_TYPE_TICKET,
    ACTIVITY_TYPE_REVIEW,
    ACTIVITY_TYPE_SECURITY,
)

CATEGORY_ORDER = "order"
CATEGORY_TICKET = "ticket"
CATEGORY_REVIEW = "review"
CATEGORY_SECURITY = "security"

SEVERITY_NEUTRAL = "neutral"
SEVERITY_MUTED = "muted"
SEVERITY_INFO = "info"
SEVERITY_SUCCESS = "success"
SEVERITY_WARNING = "warning"
SEVERITY_DANGER = "danger"
SEVERITY_ACCENT = "accent"

SEVERITIES = (
    SEVERITY_NEUTRAL,
    SEVERITY_MUTED,
    SEVERITY_INFO,
    SEVERITY_SUCCESS,
    SEVERITY_WARNING,
    SEVERITY_DANGER,
    SEVERITY_ACCENT,
)


@dataclass(frozen=True)
class SourceRef:
    """Pointer back to the record an activity item was derived from."""

    kind: str
    record_id: str | None
    section: str | None = None


@dataclass(frozen=True)
class ActivityItem:
    """Represents a single user-facing event in the activity timeline.

    Items leave the normalizer with empty display fields; the classifier
    returns copies with ``title``, ``subtitle``, ``category``, ``severity``,
    ``icon`` and ``actionable`` filled in.
    """

    id: str
    type: str
    date: datetime
    source_ref: SourceRef
    context: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    title: str = ""
    subtitle: str = ""
    category: str = ""
    severity: str = SEVERITY_NEUTRAL
    icon: str = ""
    actionable: bool = False


__all__ = [
    "ActivityItem",
    "SourceRef",
    "ACTIVITY_TYPE_ORDER_CREATED",
    "ACTIVITY_TYPE_ORDER_UPDATED",
    "ACTIVITY_TYPE_TICKET",
    "ACTIVITY_TYPE_REVIEW",
    "ACTIVITY_TYPE_SECURITY",
    "ACTIVITY_TYPES",
    "CATEGORY_ORDER",
    "CATEGORY_TICKET",
    "CATEGORY_REVIEW",
    "CATEGORY_SECURITY",
    "SEVERITY_NEUTRAL",
    "SEVERITY_MUTED",
    "SEVERITY_INFO",
    "SEVERITY_SUCCESS",
    "SEVERITY_WARNING",
    "SEVERITY_DANGER",
    "SEVERITY_ACCENT",
    "SEVERITIES",
]
