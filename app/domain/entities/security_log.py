"""Domain entity representing an account security or system log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

SECURITY_ACTION_ACCOUNT_CREATED = "ACCOUNT_CREATED"
SECURITY_ACTION_LOGIN = "LOGIN"
SECURITY_ACTION_ADMIN_UPDATE = "ADMIN_UPDATE"
SECURITY_ACTION_PROFILE_UPDATE = "PROFILE_UPDATE"


@dataclass
class SecurityLog:
    """Event recorded against a user account. Older records may lack an id."""

    id: str | None
    created_at: datetime | str | None
    action: str | None = None
    description: str | None = None
    user_id: str | None = None


__all__ = [
    "SecurityLog",
    "SECURITY_ACTION_ACCOUNT_CREATED",
    "SECURITY_ACTION_LOGIN",
    "SECURITY_ACTION_ADMIN_UPDATE",
    "SECURITY_ACTION_PROFILE_UPDATE",
]
