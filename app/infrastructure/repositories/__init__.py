"""Repository implementations for infrastructure layer."""

from .audit_log_repository import AuditLogRepository
from .order_repository import OrderRepository
from .review_repository import ReviewRepository
from .security_log_repository import SecurityLogRepository
from .support_ticket_repository import SupportTicketRepository

__all__ = [
    "AuditLogRepository",
    "OrderRepository",
    "ReviewRepository",
    "SecurityLogRepository",
    "SupportTicketRepository",
]
