"""SQLAlchemy model for customer support tickets."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, String

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class SupportTicketModel(Base):
    """Database representation of a support ticket."""

    __tablename__ = "support_ticket"

    id = Column(String(64), primary_key=True, default=lambda: uuid4().hex)
    user_id = Column(String(64), nullable=False, index=True)
    status = Column(String(30), nullable=False, default="open")
    subject = Column(String(200), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["SupportTicketModel"]
