"""Persistence helpers for security log entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import SecurityLog
from app.infrastructure.models import SecurityLogModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
    parse_timestamp,
)


class SecurityLogRepository:
    """Provide read and write helpers for :class:`SecurityLog` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: str) -> Sequence[SecurityLog]:
        query = (
            self.session.query(SecurityLogModel)
            .filter(SecurityLogModel.user_id == user_id)
            .order_by(SecurityLogModel.created_at.desc(), SecurityLogModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, log: SecurityLog) -> SecurityLog:
        if log.user_id is None:
            raise ValueError("Security log user_id is required")
        model = SecurityLogModel()
        model.user_id = log.user_id
        model.action = log.action
        model.description = log.description
        model.created_at = ensure_app_naive_datetime(
            parse_timestamp(log.created_at) or now_in_app_timezone()
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: SecurityLogModel) -> SecurityLog:
        return SecurityLog(
            id=str(model.id),
            user_id=model.user_id,
            action=model.action,
            description=model.description,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["SecurityLogRepository"]
