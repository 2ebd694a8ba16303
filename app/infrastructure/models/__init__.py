"""ORM models used by the application infrastructure."""

from .audit_log import AuditLogModel
from .order import OrderModel
from .review import ReviewModel
from .security_log import SecurityLogModel
from .support_ticket import SupportTicketModel

__all__ = [
    "AuditLogModel",
    "OrderModel",
    "ReviewModel",
    "SecurityLogModel",
    "SupportTicketModel",
]
