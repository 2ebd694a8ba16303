"""Persistence helpers for review entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Review
from app.infrastructure.models import ReviewModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
    parse_timestamp,
)


class ReviewRepository:
    """Provide read and write helpers for :class:`Review` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: str) -> Sequence[Review]:
        query = (
            self.session.query(ReviewModel)
            .filter(ReviewModel.user_id == user_id)
            .order_by(ReviewModel.created_at.desc(), ReviewModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, review: Review) -> Review:
        if review.user_id is None:
            raise ValueError("Review user_id is required")
        model = ReviewModel()
        if review.id is not None:
            model.id = review.id
        model.user_id = review.user_id
        model.product_id = review.product_id
        model.rating = review.rating
        model.comment = review.comment
        model.created_at = ensure_app_naive_datetime(
            parse_timestamp(review.created_at) or now_in_app_timezone()
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ReviewModel) -> Review:
        return Review(
            id=model.id,
            user_id=model.user_id,
            product_id=model.product_id,
            rating=model.rating,
            comment=model.comment,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ReviewRepository"]
