"""Persistence helpers for support ticket entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import TICKET_STATUS_OPEN, SupportTicket
from app.infrastructure.models import SupportTicketModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
    parse_timestamp,
)


class SupportTicketRepository:
    """Provide read and write helpers for :class:`SupportTicket` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: str) -> Sequence[SupportTicket]:
        query = (
            self.session.query(SupportTicketModel)
            .filter(SupportTicketModel.user_id == user_id)
            .order_by(SupportTicketModel.created_at.desc(), SupportTicketModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, ticket: SupportTicket) -> SupportTicket:
        if ticket.user_id is None:
            raise ValueError("Support ticket user_id is required")
        model = SupportTicketModel()
        if ticket.id is not None:
            model.id = ticket.id
        model.user_id = ticket.user_id
        model.status = ticket.status or TICKET_STATUS_OPEN
        model.subject = ticket.subject
        model.created_at = ensure_app_naive_datetime(
            parse_timestamp(ticket.created_at) or now_in_app_timezone()
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: SupportTicketModel) -> SupportTicket:
        return SupportTicket(
            id=model.id,
            user_id=model.user_id,
            status=model.status,
            subject=model.subject,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["SupportTicketRepository"]
