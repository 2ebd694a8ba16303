"""SQLAlchemy model for storefront orders."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, Numeric, String

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


def _new_id() -> str:
    return uuid4().hex


class OrderModel(Base):
    """Database representation of a customer order."""

    __tablename__ = "customer_order"

    id = Column(String(64), primary_key=True, default=_new_id)
    user_id = Column(String(64), nullable=False, index=True)
    status = Column(String(50), nullable=False, default="Pending")
    total_amount = Column(Numeric(12, 2), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, onupdate=now_in_app_naive_datetime)


__all__ = ["OrderModel"]
