from .activity import (
    ActivityBucketRead,
    ActivityItemRead,
    ActivityLogRead,
    ActivitySources,
    OrderPayload,
    RecentActivityRead,
    RecentActivitySources,
    ReviewPayload,
    SecurityLogPayload,
    SourceRefRead,
    SupportTicketPayload,
)
from .audit_log import AuditLogRead

__all__ = [
    "ActivityBucketRead",
    "ActivityItemRead",
    "ActivityLogRead",
    "ActivitySources",
    "AuditLogRead",
    "OrderPayload",
    "RecentActivityRead",
    "RecentActivitySources",
    "ReviewPayload",
    "SecurityLogPayload",
    "SourceRefRead",
    "SupportTicketPayload",
]
