"""Tests for sorting, filtering and day bucketing of the activity log."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from activity_test_helpers import IST, NOW, make_log, make_order, make_review, make_ticket
from app.application.use_cases.activity import (
    BUCKET_TODAY,
    BUCKET_YESTERDAY,
    aggregate_activity,
    bucket_activity,
    build_activity_log,
    filter_activity,
    format_bucket_label,
    normalize_activity_filter,
    sort_activity,
)


def _full_history():
    return dict(
        orders=[
            make_order("o-old", created_at=NOW - timedelta(days=3), status="Delivered",
                       updated_after=timedelta(days=1)),
            make_order("o-new", created_at=NOW - timedelta(minutes=30)),
        ],
        tickets=[make_ticket("t-1", created_at=NOW - timedelta(days=1, hours=2))],
        reviews=[make_review("r-1", created_at=NOW - timedelta(hours=5))],
        security_logs=[
            make_log("l-1", created_at=NOW - timedelta(days=10), action="ACCOUNT_CREATED"),
            make_log("l-2", created_at=NOW - timedelta(hours=1)),
        ],
    )


def test_aggregate_sorts_newest_first():
    items = aggregate_activity(**_full_history())

    assert [item.id for item in items] == [
        "ord-cr-o-new",
        "sys-l-2",
        "rev-r-1",
        "tkt-t-1",
        "ord-up-o-old",
        "ord-cr-o-old",
        "sys-l-1",
    ]
    assert all(items[i].date >= items[i + 1].date for i in range(len(items) - 1))
    assert all(item.title for item in items)


def test_ties_keep_emission_order():
    same_moment = NOW - timedelta(hours=1)

    items = aggregate_activity(
        [make_order("o", created_at=same_moment)],
        [make_ticket("t", created_at=same_moment)],
        [make_review("r", created_at=same_moment)],
        [make_log("l", created_at=same_moment)],
    )

    assert [item.id for item in items] == ["ord-cr-o", "tkt-t", "rev-r", "sys-l"]


def test_sort_is_idempotent():
    items = aggregate_activity(**_full_history())

    assert sort_activity(items) == items
    assert sort_activity(sort_activity(items)) == items


def test_aggregate_of_nothing_is_empty():
    assert aggregate_activity(None, None, None, None) == []


@pytest.mark.parametrize(
    ("activity_filter", "expected_types"),
    [
        ("all", {"order_created", "order_updated", "ticket", "review", "security"}),
        ("order", {"order_created", "order_updated"}),
        ("ticket", {"ticket"}),
        ("review", {"review"}),
        ("security", {"security"}),
    ],
)
def test_filter_selects_types(activity_filter, expected_types):
    items = aggregate_activity(**_full_history())

    selected = filter_activity(items, activity_filter)

    assert {item.type for item in selected} == expected_types
    assert selected == [item for item in items if item in selected]


def test_filter_token_is_normalized():
    assert normalize_activity_filter(" Order ") == "order"
    assert normalize_activity_filter(None) == "all"


def test_unknown_filter_raises():
    with pytest.raises(ValueError, match="Unknown activity filter"):
        normalize_activity_filter("payments")


@pytest.mark.parametrize(
    ("value", "label"),
    [
        (NOW - timedelta(hours=14, minutes=59), BUCKET_TODAY),
        (NOW - timedelta(hours=15, minutes=1), BUCKET_YESTERDAY),
        (NOW - timedelta(days=1, hours=14), BUCKET_YESTERDAY),
        (datetime(2026, 10, 7, 12, 0, tzinfo=IST), "Oct 7, 2026"),
        (datetime(2025, 12, 31, 23, 0, tzinfo=IST), "Dec 31, 2025"),
    ],
)
def test_bucket_labels(value, label):
    assert format_bucket_label(value, now=NOW) == label


def test_bucket_label_uses_app_timezone_day():
    # 20:00 UTC on the 16th is already the 17th in Asia/Kolkata.
    late_utc = datetime(2026, 10, 16, 20, 0, tzinfo=timezone.utc)

    assert format_bucket_label(late_utc, now=NOW) == BUCKET_TODAY


def test_buckets_partition_filtered_items_in_order():
    items = aggregate_activity(**_full_history())

    buckets = bucket_activity(items, "all", now=NOW)

    assert list(buckets) == [
        BUCKET_TODAY,
        BUCKET_YESTERDAY,
        "Oct 15, 2026",
        "Oct 14, 2026",
        "Oct 7, 2026",
    ]
    flattened = [item for bucket in buckets.values() for item in bucket]
    assert flattened == items
    assert all(bucket for bucket in buckets.values())


def test_bucket_activity_applies_filter():
    items = aggregate_activity(**_full_history())

    buckets = bucket_activity(items, "security", now=NOW)

    assert list(buckets) == [BUCKET_TODAY, "Oct 7, 2026"]
    assert [item.id for item in buckets[BUCKET_TODAY]] == ["sys-l-2"]


def test_empty_filter_result_gives_no_buckets():
    items = aggregate_activity(orders=[make_order()])

    assert bucket_activity(items, "review", now=NOW) == {}


def test_single_ticket_example():
    ticket = make_ticket("t9", created_at=NOW - timedelta(hours=2), status="open", subject="Refund")

    log = build_activity_log(tickets=[ticket], activity_filter="all", now=NOW)

    assert list(log.buckets) == [BUCKET_TODAY]
    (item,) = log.buckets[BUCKET_TODAY]
    assert item.title == "Support Ticket Opened"
    assert item.subtitle == "Refund"
    assert item.actionable is True
    assert log.items == [item]


def test_build_activity_log_filters_before_bucketing():
    log = build_activity_log(**_full_history(), activity_filter="order", now=NOW)

    assert [item.id for item in log.items] == ["ord-cr-o-new", "ord-up-o-old", "ord-cr-o-old"]
    assert list(log.buckets) == [BUCKET_TODAY, "Oct 15, 2026", "Oct 14, 2026"]


def test_out_of_range_dates_do_not_blank_the_log():
    orders = [{"id": "o1", "createdAt": "9999-12-31T23:00:00-05:00"}, make_order("kept")]

    log = build_activity_log(orders, now=NOW)

    assert [item.id for item in log.items] == ["ord-cr-kept"]


def test_build_activity_log_rejects_unknown_filter():
    with pytest.raises(ValueError):
        build_activity_log(**_full_history(), activity_filter="everything", now=NOW)


def test_build_activity_log_is_repeatable():
    history = _full_history()

    first = build_activity_log(**history, now=NOW)
    second = build_activity_log(**history, now=NOW)

    assert first == second
