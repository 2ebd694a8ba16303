"""Endpoints exposing the account activity log and overview feed."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.activity import (
    ActivityLog,
    build_activity_log,
    get_recent_activity,
    get_user_activity_log,
    get_user_recent_activity,
)
from app.config import get_settings
from app.domain.entities import ActivityItem, Order, Review, SecurityLog, SupportTicket
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    ActivityBucketRead,
    ActivityItemRead,
    ActivityLogRead,
    ActivitySources,
    OrderPayload,
    RecentActivityRead,
    RecentActivitySources,
    ReviewPayload,
    SecurityLogPayload,
    SourceRefRead,
    SupportTicketPayload,
)
from app.utils import format_short_date, format_time_of_day

router = APIRouter(tags=["activity"])

logger = logging.getLogger(__name__)


def _item_fields(item: ActivityItem) -> dict[str, object]:
    return {
        "id": item.id,
        "type": item.type,
        "date": item.date,
        "time": format_time_of_day(item.date),
        "title": item.title,
        "subtitle": item.subtitle,
        "category": item.category,
        "severity": item.severity,
        "icon": item.icon,
        "actionable": item.actionable,
        "source_ref": SourceRefRead(
            kind=item.source_ref.kind,
            record_id=item.source_ref.record_id,
            section=item.source_ref.section,
        ),
    }


def _item_to_schema(item: ActivityItem) -> ActivityItemRead:
    return ActivityItemRead(**_item_fields(item))


def _recent_item_to_schema(item: ActivityItem) -> RecentActivityRead:
    return RecentActivityRead(**_item_fields(item), date_label=format_short_date(item.date))


def _log_to_schema(log: ActivityLog, activity_filter: str) -> ActivityLogRead:
    return ActivityLogRead(
        filter=activity_filter,
        items=[_item_to_schema(item) for item in log.items],
        buckets=[
            ActivityBucketRead(label=label, items=[_item_to_schema(item) for item in items])
            for label, items in log.buckets.items()
        ],
    )


def _order_from_payload(payload: OrderPayload) -> Order:
    return Order(
        id=None if payload.id is None else str(payload.id),
        created_at=payload.created_at,
        updated_at=payload.updated_at,
        status=payload.status,
        total_amount=payload.total_amount,
    )


def _ticket_from_payload(payload: SupportTicketPayload) -> SupportTicket:
    return SupportTicket(
        id=None if payload.id is None else str(payload.id),
        created_at=payload.created_at,
        status=payload.status,
        subject=payload.subject,
    )


def _review_from_payload(payload: ReviewPayload) -> Review:
    return Review(
        id=None if payload.id is None else str(payload.id),
        created_at=payload.created_at,
        product_id=payload.product_id,
        rating=payload.rating,
    )


def _security_log_from_payload(payload: SecurityLogPayload) -> SecurityLog:
    return SecurityLog(
        id=None if payload.id is None else str(payload.id),
        created_at=payload.created_at,
        action=payload.action,
        description=payload.description,
    )


@router.post("/activity/timeline", response_model=ActivityLogRead)
def compute_activity_timeline(
    sources: ActivitySources,
    activity_filter: str = Query("all", alias="filter", description="all, order, ticket, review or security"),
    now: datetime | None = Query(None, description="Reference time for Today/Yesterday buckets"),
) -> ActivityLogRead:
    """Build the bucketed activity log from caller-supplied collections."""

    settings = get_settings()
    try:
        log = build_activity_log(
            [_order_from_payload(order) for order in sources.orders],
            [_ticket_from_payload(ticket) for ticket in sources.tickets],
            [_review_from_payload(review) for review in sources.reviews],
            [_security_log_from_payload(log) for log in sources.security_logs],
            activity_filter=activity_filter,
            now=now,
            update_threshold=timedelta(minutes=settings.order_update_threshold_minutes),
            currency_symbol=settings.currency_symbol,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _log_to_schema(log, activity_filter.strip().lower())


@router.post("/activity/recent", response_model=list[RecentActivityRead])
def compute_recent_activity(
    sources: RecentActivitySources,
    limit: int | None = Query(None, ge=1, le=50, description="Maximum number of items"),
) -> list[RecentActivityRead]:
    """Return the overview feed computed from caller-supplied collections."""

    settings = get_settings()
    items = get_recent_activity(
        [_order_from_payload(order) for order in sources.orders],
        [_ticket_from_payload(ticket) for ticket in sources.tickets],
        [_review_from_payload(review) for review in sources.reviews],
        limit=settings.recent_activity_limit if limit is None else limit,
        currency_symbol=settings.currency_symbol,
    )
    return [_recent_item_to_schema(item) for item in items]


@router.get("/users/{user_id}/activity", response_model=ActivityLogRead)
def read_user_activity(
    user_id: str,
    activity_filter: str = Query("all", alias="filter", description="all, order, ticket, review or security"),
    now: datetime | None = Query(None, description="Reference time for Today/Yesterday buckets"),
    db: Session = Depends(get_db),
) -> ActivityLogRead:
    """Return the bucketed activity log built from the user's stored records."""

    try:
        log = get_user_activity_log(db, user_id, activity_filter=activity_filter, now=now)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    logger.debug("Served %d activity items for user %s", len(log.items), user_id)
    return _log_to_schema(log, activity_filter.strip().lower())


@router.get("/users/{user_id}/activity/recent", response_model=list[RecentActivityRead])
def read_user_recent_activity(
    user_id: str,
    limit: int | None = Query(None, ge=1, le=50, description="Maximum number of items"),
    db: Session = Depends(get_db),
) -> list[RecentActivityRead]:
    """Return the overview feed built from the user's stored records."""

    items = get_user_recent_activity(db, user_id, limit=limit)
    return [_recent_item_to_schema(item) for item in items]


__all__ = ["router"]
