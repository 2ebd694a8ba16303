"""Persistence helpers for order entities."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from sqlalchemy.orm import Session

from app.domain.entities import Order
from app.infrastructure.models import OrderModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
    parse_timestamp,
)


class OrderRepository:
    """Provide read and write helpers for :class:`Order` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: str) -> Sequence[Order]:
        """Return the orders placed by ``user_id``, newest first."""

        query = (
            self.session.query(OrderModel)
            .filter(OrderModel.user_id == user_id)
            .order_by(OrderModel.created_at.desc(), OrderModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, order: Order) -> Order:
        if order.user_id is None:
            raise ValueError("Order user_id is required")
        model = OrderModel()
        if order.id is not None:
            model.id = order.id
        created_at = parse_timestamp(order.created_at) or now_in_app_timezone()
        model.user_id = order.user_id
        model.status = order.status or "Pending"
        model.total_amount = (
            Decimal(str(order.total_amount)) if order.total_amount is not None else None
        )
        model.created_at = ensure_app_naive_datetime(created_at)
        model.updated_at = ensure_app_naive_datetime(
            parse_timestamp(order.updated_at) or created_at
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: OrderModel) -> Order:
        return Order(
            id=model.id,
            user_id=model.user_id,
            status=model.status,
            total_amount=model.total_amount,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["OrderRepository"]
