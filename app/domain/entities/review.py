"""Domain entity representing a product review."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Review:
    """Rating left by a customer on a product."""

    id: str | None
    created_at: datetime | str | None
    product_id: str | None = None
    rating: int | None = None
    comment: str | None = None
    user_id: str | None = None


__all__ = ["Review"]
