"""Schemas for audit log endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class AuditLogRead(BaseModel):
    """Representation of an audit log entry returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    action: str | None
    description: str | None
    actor_name: str | None
    actor_email: str | None
    target: str | None
    created_at: datetime | None
    label: str
    severity: str
    icon: str


__all__ = ["AuditLogRead"]
