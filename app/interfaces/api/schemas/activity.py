"""Pydantic schemas for activity feed endpoints."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

# Record dates are accepted loosely; unusable values are dropped by the
# activity pipeline instead of failing the whole request.
LooseTimestamp = datetime | str | int | float | None


class _SourcePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class OrderPayload(_SourcePayload):
    id: str | int | None = None
    created_at: LooseTimestamp = Field(default=None, alias="createdAt")
    updated_at: LooseTimestamp = Field(default=None, alias="updatedAt")
    status: str | None = None
    total_amount: Decimal | float | str | None = Field(default=None, alias="totalAmount")


class SupportTicketPayload(_SourcePayload):
    id: str | int | None = None
    created_at: LooseTimestamp = Field(default=None, alias="createdAt")
    status: str | None = None
    subject: str | None = None


class ReviewPayload(_SourcePayload):
    id: str | int | None = None
    created_at: LooseTimestamp = Field(default=None, alias="createdAt")
    product_id: str | None = Field(default=None, alias="productId")
    rating: int | None = None


class SecurityLogPayload(_SourcePayload):
    id: str | int | None = None
    created_at: LooseTimestamp = Field(default=None, alias="createdAt")
    action: str | None = None
    description: str | None = None


class RecentActivitySources(_SourcePayload):
    """Collections feeding the overview feed."""

    orders: list[OrderPayload] = Field(default_factory=list)
    tickets: list[SupportTicketPayload] = Field(default_factory=list)
    reviews: list[ReviewPayload] = Field(default_factory=list)


class ActivitySources(RecentActivitySources):
    """Collections feeding the full activity log."""

    security_logs: list[SecurityLogPayload] = Field(
        default_factory=list, alias="securityLogs"
    )


class SourceRefRead(BaseModel):
    kind: str = Field(..., description="Kind of record the item was derived from")
    record_id: str | None = Field(None, description="Identifier of the source record")
    section: str | None = Field(
        None, description="Account section where the record can be opened"
    )


class ActivityItemRead(BaseModel):
    id: str = Field(..., description="Unique identifier of the activity item")
    type: str = Field(..., description="Activity type")
    date: datetime = Field(..., description="Moment the activity happened")
    time: str = Field(..., description="Clock time (HH:MM) in the application timezone")
    title: str
    subtitle: str
    category: str = Field(..., description="Grouping key used by filters")
    severity: str = Field(..., description="Display tone of the item")
    icon: str
    actionable: bool = Field(..., description="Whether the item links to a detail view")
    source_ref: SourceRefRead


class ActivityBucketRead(BaseModel):
    label: str = Field(..., description="Today, Yesterday or a calendar date")
    items: list[ActivityItemRead] = Field(default_factory=list)


class ActivityLogRead(BaseModel):
    filter: str = Field(..., description="Filter applied to the timeline")
    items: list[ActivityItemRead] = Field(default_factory=list)
    buckets: list[ActivityBucketRead] = Field(default_factory=list)


class RecentActivityRead(ActivityItemRead):
    date_label: str = Field(..., description="Short date shown in the overview (e.g. Oct 7)")


__all__ = [
    "ActivityBucketRead",
    "ActivityItemRead",
    "ActivityLogRead",
    "ActivitySources",
    "OrderPayload",
    "RecentActivityRead",
    "RecentActivitySources",
    "ReviewPayload",
    "SecurityLogPayload",
    "SourceRefRead",
    "SupportTicketPayload",
]
