"""Persistence layer for admin audit log records."""

from typing import Iterable

from sqlalchemy.orm import Session

from app.domain.entities import AuditLog
from app.infrastructure.models import AuditLogModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class AuditLogRepository:
    """Provide helpers for :class:`AuditLog` entries."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, entry: AuditLog) -> AuditLog:
        model = AuditLogModel()
        self._apply_entity_to_model(model, entry)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list(self) -> list[AuditLog]:
        """Return every audit entry, newest first."""

        models: Iterable[AuditLogModel] = (
            self.session.query(AuditLogModel)
            .order_by(AuditLogModel.created_at.desc(), AuditLogModel.id.desc())
            .all()
        )
        return [self._to_entity(model) for model in models]

    @staticmethod
    def _to_entity(model: AuditLogModel) -> AuditLog:
        return AuditLog(
            id=model.id,
            action=model.action,
            description=model.description,
            actor_name=model.actor_name,
            actor_email=model.actor_email,
            target=model.target,
            created_at=ensure_app_timezone(model.created_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: AuditLogModel, entry: AuditLog) -> None:
        model.action = entry.action
        model.description = entry.description
        model.actor_name = entry.actor_name
        model.actor_email = entry.actor_email
        model.target = entry.target
        model.created_at = (
            ensure_app_naive_datetime(entry.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone())
        )


__all__ = ["AuditLogRepository"]
