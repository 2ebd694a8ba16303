"""Tests for the declarative activity classification rules."""

from __future__ import annotations

from datetime import timedelta

import pytest

from activity_test_helpers import make_log, make_order, make_review, make_ticket
from app.application.use_cases.activity import (
    classify_activity,
    humanize_action,
    normalize_records,
)
from app.application.use_cases.activity.classifier import format_amount, short_reference
from app.domain.entities import (
    ACTIVITY_TYPE_ORDER_UPDATED,
    SEVERITY_ACCENT,
    SEVERITY_DANGER,
    SEVERITY_INFO,
    SEVERITY_MUTED,
    SEVERITY_NEUTRAL,
    SEVERITY_SUCCESS,
    SEVERITY_WARNING,
)

ORDER_ID = "65f0c2aa91bc3d12ab34cd"


def _classified(orders=None, tickets=None, reviews=None, logs=None):
    return [
        classify_activity(item)
        for item in normalize_records(orders, tickets, reviews, logs)
    ]


def _update_item(status: str):
    items = _classified([make_order(ORDER_ID, updated_after=timedelta(hours=2), status=status)])
    return next(item for item in items if item.type == ACTIVITY_TYPE_ORDER_UPDATED)


def test_delivered_order_example():
    created, updated = _classified(
        [make_order(ORDER_ID, updated_after=timedelta(hours=2), status="Delivered")]
    )

    assert (created.title, created.severity, created.icon) == (
        "Order Placed",
        SEVERITY_NEUTRAL,
        "shopping-bag",
    )
    assert created.subtitle == "#AB34CD • ₹1499"
    assert (updated.title, updated.severity, updated.icon) == (
        "Delivered",
        SEVERITY_SUCCESS,
        "check-circle",
    )
    assert updated.subtitle == "#AB34CD"


@pytest.mark.parametrize("status", ["delivered", "DELIVERED", " Delivered "])
def test_delivered_match_is_case_insensitive(status):
    assert _update_item(status).title == "Delivered"


@pytest.mark.parametrize("status", ["Cancelled", "cancelled by customer", "CANCEL_REQUESTED"])
def test_cancelled_statuses(status):
    item = _update_item(status)

    assert item.title == "Cancelled"
    assert item.severity == SEVERITY_DANGER
    assert item.icon == "x"


def test_other_status_falls_back_to_order_prefix():
    item = _update_item("Shipped")

    assert item.title == "Order Shipped"
    assert item.severity == SEVERITY_INFO
    assert item.icon == "package"


def test_blank_status_still_gets_a_title():
    assert _update_item("").title == "Order Updated"


def test_delivered_is_not_a_substring_match():
    assert _update_item("Out for delivery, delivered soon").title.startswith("Order ")


def test_ticket_titles_depend_on_status():
    opened, updated = _classified(
        tickets=[make_ticket("t1", status="open"), make_ticket("t2", status="resolved")]
    )

    assert opened.title == "Support Ticket Opened"
    assert updated.title == "Support Ticket Updated"
    assert opened.subtitle == "Where is my parcel?"
    assert {opened.severity, updated.severity} == {SEVERITY_WARNING}


def test_ticket_without_subject_has_fallback_subtitle():
    ticket = make_ticket()
    ticket.subject = None

    (item,) = _classified(tickets=[ticket])

    assert item.subtitle == "Support request"


def test_review_classification():
    (item,) = _classified(reviews=[make_review()])

    assert item.title == "Review Added"
    assert item.subtitle == "You rated a product"
    assert item.severity == SEVERITY_ACCENT
    assert item.icon == "star"


@pytest.mark.parametrize(
    ("action", "title", "icon"),
    [
        ("LOGIN", "Secure Login", "lock"),
        ("ACCOUNT_CREATED", "Welcome to Aura", "sparkles"),
        ("ADMIN_UPDATE", "Profile Updated", "shield"),
        ("PROFILE_UPDATE", "Profile Updated", "shield"),
        ("PASSWORD_RESET", "Password Reset", "user-cog"),
        (None, "System Log", "user-cog"),
        ("", "System Log", "user-cog"),
    ],
)
def test_security_actions(action, title, icon):
    (item,) = _classified(logs=[make_log(action=action)])

    assert item.title == title
    assert item.icon == icon
    assert item.actionable is False


def test_account_created_is_celebratory_and_others_muted():
    created, login = _classified(
        logs=[make_log("a", action="ACCOUNT_CREATED"), make_log("b", action="LOGIN")]
    )

    assert created.severity == SEVERITY_ACCENT
    assert login.severity == SEVERITY_MUTED


def test_security_subtitle_uses_description_or_fallback():
    described, bare = _classified(
        logs=[make_log("a", description="New device"), make_log("b", description=None)]
    )

    assert described.subtitle == "New device"
    assert bare.subtitle == "Account activity detected"


def test_actionable_and_category_per_type():
    items = _classified(
        [make_order(updated_after=timedelta(hours=3))],
        [make_ticket()],
        [make_review()],
        [make_log()],
    )

    assert [(item.type, item.category, item.actionable) for item in items] == [
        ("order_created", "order", True),
        ("order_updated", "order", True),
        ("ticket", "ticket", True),
        ("review", "review", True),
        ("security", "security", False),
    ]


def test_classification_returns_new_items():
    (raw,) = normalize_records(reviews=[make_review()])

    classified = classify_activity(raw)

    assert raw.title == ""
    assert classified is not raw
    assert classified.id == raw.id


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (1499, "₹1499"),
        (1499.0, "₹1499"),
        ("899.5", "₹899.50"),
        (None, None),
        ("n/a", None),
        ("12345678901234567890123456789.5", None),
        ("1E+40", None),
        ("1E+3", "₹1000"),
    ],
)
def test_format_amount(amount, expected):
    assert format_amount(amount) == expected


def test_order_created_without_amount_shows_reference_only():
    (item,) = _classified([make_order(ORDER_ID, total_amount=None)])

    assert item.subtitle == "#AB34CD"


def test_currency_symbol_is_configurable():
    (raw,) = normalize_records([make_order(ORDER_ID, total_amount=20)])

    assert classify_activity(raw, currency_symbol="$").subtitle == "#AB34CD • $20"


def test_helpers():
    assert humanize_action("PASSWORD_RESET") == "Password Reset"
    assert humanize_action("two__words") == "Two Words"
    assert short_reference("abc") == "ABC"
    assert short_reference(1234567) == "234567"


def test_unreadable_amount_does_not_break_classification():
    (item,) = _classified([make_order(ORDER_ID, total_amount="12345678901234567890123456789.5")])

    assert item.subtitle == "#AB34CD"
