"""SQLAlchemy model for product reviews."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ReviewModel(Base):
    """Database representation of a product review."""

    __tablename__ = "review"

    id = Column(String(64), primary_key=True, default=lambda: uuid4().hex)
    user_id = Column(String(64), nullable=False, index=True)
    product_id = Column(String(64), nullable=True)
    rating = Column(Integer, nullable=True)
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ReviewModel"]
