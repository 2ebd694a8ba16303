"""SQLAlchemy model for administrative audit records."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class AuditLogModel(Base):
    """Database representation of admin panel actions."""

    __tablename__ = "audit_log"

    id = Column(Integer, primary_key=True, index=True)
    action = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)
    actor_name = Column(String(120), nullable=True)
    actor_email = Column(String(120), nullable=True)
    target = Column(String(120), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["AuditLogModel"]
