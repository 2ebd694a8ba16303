"""Declarative rules deriving display fields for activity items."""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import Any

from app.domain.entities import (
    ACTIVITY_TYPE_ORDER_CREATED,
    ACTIVITY_TYPE_ORDER_UPDATED,
    ACTIVITY_TYPE_REVIEW,
    ACTIVITY_TYPE_SECURITY,
    ACTIVITY_TYPE_TICKET,
    CATEGORY_ORDER,
    CATEGORY_REVIEW,
    CATEGORY_SECURITY,
    CATEGORY_TICKET,
    ORDER_STATUS_CANCEL_TOKEN,
    ORDER_STATUS_DELIVERED,
    SECURITY_ACTION_ACCOUNT_CREATED,
    SECURITY_ACTION_ADMIN_UPDATE,
    SECURITY_ACTION_LOGIN,
    SECURITY_ACTION_PROFILE_UPDATE,
    SEVERITY_ACCENT,
    SEVERITY_DANGER,
    SEVERITY_INFO,
    SEVERITY_MUTED,
    SEVERITY_NEUTRAL,
    SEVERITY_SUCCESS,
    SEVERITY_WARNING,
    TICKET_STATUS_OPEN,
    ActivityItem,
)

DEFAULT_CURRENCY_SYMBOL = "₹"
SHORT_ID_LENGTH = 6


@dataclass(frozen=True)
class ClassificationRule:
    """Display attributes assigned to an activity item."""

    title: str
    severity: str
    icon: str


@dataclass(frozen=True)
class TypeProfile:
    """Per-type attributes that do not depend on the source record."""

    category: str
    actionable: bool


@dataclass(frozen=True)
class StatusMatcher:
    """Match an order status either exactly or by substring (case-insensitive)."""

    token: str
    exact: bool = False

    def matches(self, status: str) -> bool:
        normalized = status.strip().lower()
        if self.exact:
            return normalized == self.token
        return self.token in normalized


TYPE_PROFILES: dict[str, TypeProfile] = {
    ACTIVITY_TYPE_ORDER_CREATED: TypeProfile(CATEGORY_ORDER, True),
    ACTIVITY_TYPE_ORDER_UPDATED: TypeProfile(CATEGORY_ORDER, True),
    ACTIVITY_TYPE_TICKET: TypeProfile(CATEGORY_TICKET, True),
    ACTIVITY_TYPE_REVIEW: TypeProfile(CATEGORY_REVIEW, True),
    ACTIVITY_TYPE_SECURITY: TypeProfile(CATEGORY_SECURITY, False),
}

ORDER_CREATED_RULE = ClassificationRule("Order Placed", SEVERITY_NEUTRAL, "shopping-bag")

# First match wins.
ORDER_STATUS_RULES: tuple[tuple[StatusMatcher, ClassificationRule], ...] = (
    (
        StatusMatcher(ORDER_STATUS_DELIVERED, exact=True),
        ClassificationRule("Delivered", SEVERITY_SUCCESS, "check-circle"),
    ),
    (
        StatusMatcher(ORDER_STATUS_CANCEL_TOKEN),
        ClassificationRule("Cancelled", SEVERITY_DANGER, "x"),
    ),
)
ORDER_UPDATED_FALLBACK = ClassificationRule("Order {status}", SEVERITY_INFO, "package")

TICKET_OPENED_RULE = ClassificationRule("Support Ticket Opened", SEVERITY_WARNING, "ticket")
TICKET_UPDATED_RULE = ClassificationRule("Support Ticket Updated", SEVERITY_WARNING, "ticket")

REVIEW_RULE = ClassificationRule("Review Added", SEVERITY_ACCENT, "star")
REVIEW_SUBTITLE = "You rated a product"

_PROFILE_UPDATED = ClassificationRule("Profile Updated", SEVERITY_MUTED, "shield")
SECURITY_ACTION_RULES: dict[str, ClassificationRule] = {
    SECURITY_ACTION_ACCOUNT_CREATED: ClassificationRule(
        "Welcome to Aura", SEVERITY_ACCENT, "sparkles"
    ),
    SECURITY_ACTION_LOGIN: ClassificationRule("Secure Login", SEVERITY_MUTED, "lock"),
    SECURITY_ACTION_ADMIN_UPDATE: _PROFILE_UPDATED,
    SECURITY_ACTION_PROFILE_UPDATE: _PROFILE_UPDATED,
}
SECURITY_FALLBACK_ICON = "user-cog"
SECURITY_MISSING_ACTION_TITLE = "System Log"
SECURITY_DEFAULT_SUBTITLE = "Account activity detected"
TICKET_DEFAULT_SUBTITLE = "Support request"


def humanize_action(action: str) -> str:
    """Turn ``PASSWORD_RESET`` style keys into ``Password Reset``."""

    words = action.replace("_", " ").split()
    return " ".join(word.capitalize() for word in words)


def short_reference(record_id: Any) -> str:
    """Return the last characters of an id, uppercased, as shown to customers."""

    return str(record_id)[-SHORT_ID_LENGTH:].upper()


def format_amount(amount: Any, *, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str | None:
    """Format an order total, dropping decimals for whole amounts.

    Returns ``None`` for amounts that cannot be read or rounded to cents.
    """

    if amount is None or isinstance(amount, bool):
        return None
    try:
        value = Decimal(str(amount).strip())
        if not value.is_finite():
            return None
        if value == value.to_integral_value():
            return f"{currency_symbol}{value.quantize(Decimal(1))}"
        return f"{currency_symbol}{value.quantize(Decimal('0.01'))}"
    except InvalidOperation:
        return None


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _classify_order_created(item: ActivityItem, currency_symbol: str) -> tuple[ClassificationRule, str]:
    reference = f"#{short_reference(item.context.get('order_id') or item.source_ref.record_id)}"
    amount = format_amount(item.context.get("total_amount"), currency_symbol=currency_symbol)
    subtitle = f"{reference} • {amount}" if amount else reference
    return ORDER_CREATED_RULE, subtitle


def _classify_order_updated(item: ActivityItem) -> tuple[ClassificationRule, str]:
    status = _text(item.context.get("status"))
    subtitle = f"#{short_reference(item.context.get('order_id') or item.source_ref.record_id)}"
    for matcher, rule in ORDER_STATUS_RULES:
        if matcher.matches(status):
            return rule, subtitle
    title = ORDER_UPDATED_FALLBACK.title.format(status=status or "Updated")
    return replace(ORDER_UPDATED_FALLBACK, title=title), subtitle


def _classify_ticket(item: ActivityItem) -> tuple[ClassificationRule, str]:
    rule = (
        TICKET_OPENED_RULE
        if _text(item.context.get("status")).lower() == TICKET_STATUS_OPEN
        else TICKET_UPDATED_RULE
    )
    return rule, _text(item.context.get("subject")) or TICKET_DEFAULT_SUBTITLE


def _classify_security(item: ActivityItem) -> tuple[ClassificationRule, str]:
    action = _text(item.context.get("action"))
    subtitle = _text(item.context.get("description")) or SECURITY_DEFAULT_SUBTITLE
    rule = SECURITY_ACTION_RULES.get(action.upper())
    if rule is not None:
        return rule, subtitle
    title = humanize_action(action) if action else ""
    return (
        ClassificationRule(
            title or SECURITY_MISSING_ACTION_TITLE, SEVERITY_MUTED, SECURITY_FALLBACK_ICON
        ),
        subtitle,
    )


def classify_activity(
    item: ActivityItem, *, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
) -> ActivityItem:
    """Return a copy of ``item`` with title, subtitle and display tags filled in."""

    if item.type == ACTIVITY_TYPE_ORDER_CREATED:
        rule, subtitle = _classify_order_created(item, currency_symbol)
    elif item.type == ACTIVITY_TYPE_ORDER_UPDATED:
        rule, subtitle = _classify_order_updated(item)
    elif item.type == ACTIVITY_TYPE_TICKET:
        rule, subtitle = _classify_ticket(item)
    elif item.type == ACTIVITY_TYPE_REVIEW:
        rule, subtitle = REVIEW_RULE, REVIEW_SUBTITLE
    elif item.type == ACTIVITY_TYPE_SECURITY:
        rule, subtitle = _classify_security(item)
    else:
        raise ValueError(f"Unsupported activity type: {item.type}")

    profile = TYPE_PROFILES[item.type]
    return replace(
        item,
        title=rule.title,
        subtitle=subtitle,
        category=profile.category,
        severity=rule.severity,
        icon=rule.icon,
        actionable=profile.actionable,
    )


__all__ = [
    "ClassificationRule",
    "DEFAULT_CURRENCY_SYMBOL",
    "ORDER_STATUS_RULES",
    "SECURITY_ACTION_RULES",
    "TYPE_PROFILES",
    "classify_activity",
    "format_amount",
    "humanize_action",
    "short_reference",
]
