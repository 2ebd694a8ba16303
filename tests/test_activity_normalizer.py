"""Tests for turning source records into activity items."""

from __future__ import annotations

from datetime import timedelta

import pytest

from activity_test_helpers import NOW, make_log, make_order, make_review, make_ticket
from app.application.use_cases.activity import normalize_records
from app.domain.entities import (
    ACTIVITY_TYPE_ORDER_CREATED,
    ACTIVITY_TYPE_ORDER_UPDATED,
    ACTIVITY_TYPE_REVIEW,
    ACTIVITY_TYPE_SECURITY,
    ACTIVITY_TYPE_TICKET,
)


def test_order_updated_long_after_creation_yields_two_items():
    order = make_order("ord1", updated_after=timedelta(hours=2), status="Delivered")

    items = normalize_records([order])

    assert [item.type for item in items] == [
        ACTIVITY_TYPE_ORDER_CREATED,
        ACTIVITY_TYPE_ORDER_UPDATED,
    ]
    assert [item.id for item in items] == ["ord-cr-ord1", "ord-up-ord1"]
    assert items[0].date == order.created_at
    assert items[1].date == order.created_at + timedelta(hours=2)


@pytest.mark.parametrize(
    "updated_after",
    [timedelta(0), timedelta(minutes=59), timedelta(hours=1)],
)
def test_order_updated_within_threshold_yields_single_item(updated_after):
    items = normalize_records([make_order(updated_after=updated_after)])

    assert [item.type for item in items] == [ACTIVITY_TYPE_ORDER_CREATED]


def test_custom_threshold_controls_update_items():
    order = make_order(updated_after=timedelta(minutes=20))

    assert len(normalize_records([order], update_threshold=timedelta(minutes=10))) == 2
    assert len(normalize_records([order], update_threshold=timedelta(minutes=30))) == 1


def test_order_updates_can_be_left_out():
    order = make_order(updated_after=timedelta(days=2))

    items = normalize_records([order], include_order_updates=False)

    assert [item.type for item in items] == [ACTIVITY_TYPE_ORDER_CREATED]


def test_unparseable_updated_at_keeps_only_created_item():
    order = make_order()
    order.updated_at = "yesterday-ish"

    items = normalize_records([order])

    assert [item.type for item in items] == [ACTIVITY_TYPE_ORDER_CREATED]


def test_absent_collections_are_treated_as_empty():
    assert normalize_records() == []
    assert normalize_records(None, [], None, ()) == []


def test_sources_are_emitted_in_fixed_order():
    items = normalize_records(
        [make_order()],
        [make_ticket()],
        [make_review()],
        [make_log()],
    )

    assert [item.type for item in items] == [
        ACTIVITY_TYPE_ORDER_CREATED,
        ACTIVITY_TYPE_TICKET,
        ACTIVITY_TYPE_REVIEW,
        ACTIVITY_TYPE_SECURITY,
    ]


def test_records_with_missing_or_bad_dates_are_skipped():
    broken_order = make_order("broken", created_at="not-a-date")
    far_future_order = {"id": "far", "createdAt": "9999-12-31T23:00:00-05:00"}
    epoch_edge_order = {"id": "edge", "createdAt": 253402300799000}
    missing_ticket = make_ticket("tk-missing")
    missing_ticket.created_at = None

    items = normalize_records(
        [broken_order, far_future_order, epoch_edge_order, make_order("fine")],
        [missing_ticket, make_ticket("tk-ok")],
    )

    assert [item.id for item in items] == ["ord-cr-fine", "tkt-tk-ok"]


def test_records_without_ids_are_skipped_except_security_logs():
    order = make_order()
    order.id = None
    review = make_review()
    review.id = "   "

    items = normalize_records([order], None, [review], [make_log(None)])

    assert [item.type for item in items] == [ACTIVITY_TYPE_SECURITY]


def test_ids_are_namespaced_by_source_type():
    items = normalize_records(
        [make_order("42")],
        [make_ticket("42")],
        [make_review("42")],
        [make_log("42")],
    )

    assert [item.id for item in items] == ["ord-cr-42", "tkt-42", "rev-42", "sys-42"]
    assert len({item.id for item in items}) == len(items)


def test_security_log_without_id_gets_deterministic_id():
    log = make_log(None, action="PASSWORD_RESET", description=None)

    first = normalize_records(security_logs=[log])
    second = normalize_records(security_logs=[log])

    assert first[0].id == second[0].id
    assert first[0].id.startswith("sys-")
    assert first[0].source_ref.record_id is None

    other = make_log(None, action="LOGIN", description=None)
    assert normalize_records(security_logs=[other])[0].id != first[0].id


def test_identical_logs_without_id_stay_unique():
    log = make_log(None)

    items = normalize_records(security_logs=[log, log, log])

    base = items[0].id
    assert [item.id for item in items] == [base, f"{base}-2", f"{base}-3"]


def test_suffixed_ids_do_not_collide_with_existing_ids():
    items = normalize_records(
        security_logs=[make_log("a"), make_log("a"), make_log("a-2"), make_log("a")]
    )

    ids = [item.id for item in items]
    assert ids == ["sys-a", "sys-a-2", "sys-a-2-2", "sys-a-3"]
    assert len(set(ids)) == len(ids)


def test_suffix_skips_ids_emitted_earlier():
    items = normalize_records(security_logs=[make_log("a-2"), make_log("a"), make_log("a")])

    assert [item.id for item in items] == ["sys-a-2", "sys-a", "sys-a-3"]


def test_camel_case_mappings_are_accepted():
    order = {
        "id": "abc123xyz789",
        "createdAt": "2026-10-17T02:00:00Z",
        "updatedAt": "2026-10-17T06:00:00Z",
        "status": "Shipped",
        "totalAmount": 250,
    }
    log = {"createdAt": "2026-10-17T03:00:00.000Z", "action": "LOGIN"}

    items = normalize_records([order], security_logs=[log])

    assert [item.type for item in items] == [
        ACTIVITY_TYPE_ORDER_CREATED,
        ACTIVITY_TYPE_ORDER_UPDATED,
        ACTIVITY_TYPE_SECURITY,
    ]
    assert items[0].date.utcoffset() == NOW.utcoffset()
    assert items[0].date.hour == 7 and items[0].date.minute == 30
    assert items[0].context["total_amount"] == 250


def test_source_ref_points_back_to_record():
    items = normalize_records(
        [make_order("o-1")],
        [make_ticket("t-1")],
        [make_review("r-1")],
        [make_log("l-1")],
    )

    refs = [(item.source_ref.kind, item.source_ref.record_id, item.source_ref.section) for item in items]
    assert refs == [
        ("order", "o-1", "orders"),
        ("ticket", "t-1", "support"),
        ("review", "r-1", "reviews"),
        ("security_log", "l-1", None),
    ]


def test_normalizer_does_not_mutate_inputs():
    orders = [make_order("b"), make_order("a")]
    snapshot = list(orders)

    normalize_records(orders)

    assert orders == snapshot
