"""Aggregate application use cases."""

from .activity import (
    build_activity_log,
    get_recent_activity,
    get_user_activity_log,
    get_user_recent_activity,
)
from .audit_logs import list_audit_logs

__all__ = [
    "build_activity_log",
    "get_recent_activity",
    "get_user_activity_log",
    "get_user_recent_activity",
    "list_audit_logs",
]
