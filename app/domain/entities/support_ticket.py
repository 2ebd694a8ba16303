"""Domain entity representing a customer support ticket."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

TICKET_STATUS_OPEN = "open"


@dataclass
class SupportTicket:
    """Support request raised from the account page."""

    id: str | None
    created_at: datetime | str | None
    status: str | None = None
    subject: str | None = None
    user_id: str | None = None


__all__ = ["SupportTicket", "TICKET_STATUS_OPEN"]
