"""SQLAlchemy model for account security and system logs."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class SecurityLogModel(Base):
    """Database representation of an account security event."""

    __tablename__ = "security_log"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    action = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["SecurityLogModel"]
