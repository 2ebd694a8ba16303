"""Routes for inspecting the administrative audit log."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.audit_logs import (
    classify_audit_action,
    list_audit_logs as list_audit_logs_uc,
)
from app.domain.entities import AuditLog
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import AuditLogRead

router = APIRouter(prefix="/audit-logs", tags=["audit_logs"])


def _audit_log_to_read_model(entry: AuditLog) -> AuditLogRead:
    style = classify_audit_action(entry.action)
    return AuditLogRead(
        id=entry.id or 0,
        action=entry.action,
        description=entry.description,
        actor_name=entry.actor_name,
        actor_email=entry.actor_email,
        target=entry.target,
        created_at=entry.created_at,
        label=style.label,
        severity=style.severity,
        icon=style.icon,
    )


@router.get("/", response_model=list[AuditLogRead])
def list_audit_logs(
    action_filter: str = Query("ALL", alias="filter", description="ALL, CREATE, UPDATE, DELETE or AUTH"),
    search: str | None = Query(None, description="Text matched against description, actor and action"),
    db: Session = Depends(get_db),
) -> list[AuditLogRead]:
    """Return audit entries filtered by action category and search text."""

    try:
        entries = list_audit_logs_uc(db, action_filter=action_filter, search=search)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [_audit_log_to_read_model(entry) for entry in entries]


__all__ = ["router"]
