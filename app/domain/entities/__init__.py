"""Domain entities exposed by the application."""

from .activity_item import (
    ACTIVITY_TYPE_ORDER_CREATED,
    ACTIVITY_TYPE_ORDER_UPDATED,
    ACTIVITY_TYPE_REVIEW,
    ACTIVITY_TYPE_SECURITY,
    ACTIVITY_TYPE_TICKET,
    ACTIVITY_TYPES,
    CATEGORY_ORDER,
    CATEGORY_REVIEW,
    CATEGORY_SECURITY,
    CATEGORY_TICKET,
    SEVERITIES,
    SEVERITY_ACCENT,
    SEVERITY_DANGER,
    SEVERITY_INFO,
    SEVERITY_MUTED,
    SEVERITY_NEUTRAL,
    SEVERITY_SUCCESS,
    SEVERITY_WARNING,
    ActivityItem,
    SourceRef,
)
from .audit_log import AuditLog
from .order import ORDER_STATUS_CANCEL_TOKEN, ORDER_STATUS_DELIVERED, Order
from .review import Review
from .security_log import (
    SECURITY_ACTION_ACCOUNT_CREATED,
    SECURITY_ACTION_ADMIN_UPDATE,
    SECURITY_ACTION_LOGIN,
    SECURITY_ACTION_PROFILE_UPDATE,
    SecurityLog,
)
from .support_ticket import TICKET_STATUS_OPEN, SupportTicket

__all__ = [
    "ActivityItem",
    "SourceRef",
    "AuditLog",
    "Order",
    "Review",
    "SecurityLog",
    "SupportTicket",
    "ACTIVITY_TYPE_ORDER_CREATED",
    "ACTIVITY_TYPE_ORDER_UPDATED",
    "ACTIVITY_TYPE_TICKET",
    "ACTIVITY_TYPE_REVIEW",
    "ACTIVITY_TYPE_SECURITY",
    "ACTIVITY_TYPES",
    "CATEGORY_ORDER",
    "CATEGORY_TICKET",
    "CATEGORY_REVIEW",
    "CATEGORY_SECURITY",
    "SEVERITY_NEUTRAL",
    "SEVERITY_MUTED",
    "SEVERITY_INFO",
    "SEVERITY_SUCCESS",
    "SEVERITY_WARNING",
    "SEVERITY_DANGER",
    "SEVERITY_ACCENT",
    "SEVERITIES",
    "ORDER_STATUS_DELIVERED",
    "ORDER_STATUS_CANCEL_TOKEN",
    "TICKET_STATUS_OPEN",
    "SECURITY_ACTION_ACCOUNT_CREATED",
    "SECURITY_ACTION_LOGIN",
    "SECURITY_ACTION_ADMIN_UPDATE",
    "SECURITY_ACTION_PROFILE_UPDATE",
]
