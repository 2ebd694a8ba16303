"""Domain entity representing a storefront order."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

ORDER_STATUS_DELIVERED = "delivered"
ORDER_STATUS_CANCEL_TOKEN = "cancel"


@dataclass
class Order:
    """Order placed by a customer, as delivered by the order service."""

    id: str | None
    created_at: datetime | str | None
    updated_at: datetime | str | None = None
    status: str | None = None
    total_amount: Decimal | float | int | None = None
    user_id: str | None = None


__all__ = ["Order", "ORDER_STATUS_DELIVERED", "ORDER_STATUS_CANCEL_TOKEN"]
