"""Domain entity representing an administrative audit entry."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class AuditLog:
    """Action performed by a staff member in the admin panel."""

    id: int | None
    action: str | None
    description: str | None
    actor_name: str | None
    actor_email: str | None
    target: str | None
    created_at: datetime | None


__all__ = ["AuditLog"]
