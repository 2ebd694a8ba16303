"""Use cases for the administrative audit log panel."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.domain.entities import (
    SEVERITY_DANGER,
    SEVERITY_INFO,
    SEVERITY_NEUTRAL,
    SEVERITY_SUCCESS,
    SEVERITY_WARNING,
    AuditLog,
)
from app.infrastructure.repositories import AuditLogRepository

AUDIT_FILTER_ALL = "ALL"
AUDIT_FILTER_CREATE = "CREATE"
AUDIT_FILTER_UPDATE = "UPDATE"
AUDIT_FILTER_DELETE = "DELETE"
AUDIT_FILTER_AUTH = "AUTH"


@dataclass(frozen=True)
class AuditActionStyle:
    """Label and display tags shown next to an audit entry."""

    label: str
    severity: str
    icon: str


# Checked in order; the first rule whose keyword appears in the action wins.
AUDIT_ACTION_RULES: tuple[tuple[tuple[str, ...], AuditActionStyle], ...] = (
    (("DELETE",), AuditActionStyle("Deleted", SEVERITY_DANGER, "trash")),
    (("UPDATE", "EDIT"), AuditActionStyle("Updated", SEVERITY_WARNING, "edit")),
    (("CREATE", "ADD"), AuditActionStyle("Created", SEVERITY_SUCCESS, "plus-circle")),
    (("LOGIN", "AUTH"), AuditActionStyle("Security", SEVERITY_INFO, "shield")),
)
AUDIT_ACTION_FALLBACK = AuditActionStyle("Action", SEVERITY_NEUTRAL, "check-circle")

AUDIT_FILTER_KEYWORDS: dict[str, tuple[str, ...]] = {
    AUDIT_FILTER_CREATE: ("CREATE",),
    AUDIT_FILTER_UPDATE: ("UPDATE",),
    AUDIT_FILTER_DELETE: ("DELETE",),
    AUDIT_FILTER_AUTH: ("LOGIN", "AUTH"),
}


def classify_audit_action(action: str | None) -> AuditActionStyle:
    """Return the display style for an administrative ``action`` key."""

    upper_action = (action or "").upper()
    for keywords, style in AUDIT_ACTION_RULES:
        if any(keyword in upper_action for keyword in keywords):
            return style
    return AUDIT_ACTION_FALLBACK


def _search_haystack(entry: AuditLog) -> str:
    return "".join(
        part or ""
        for part in (entry.description, entry.actor_name, entry.actor_email, entry.action)
    ).lower()


def filter_audit_logs(
    entries: Iterable[AuditLog],
    *,
    action_filter: str | None = AUDIT_FILTER_ALL,
    search: str | None = None,
) -> list[AuditLog]:
    """Filter entries by action category and case-insensitive text search."""

    token = (action_filter or AUDIT_FILTER_ALL).strip().upper()
    if token != AUDIT_FILTER_ALL and token not in AUDIT_FILTER_KEYWORDS:
        raise ValueError(f"Unknown audit log filter '{action_filter}'")
    keywords = AUDIT_FILTER_KEYWORDS.get(token)
    needle = (search or "").strip().lower()

    selected: list[AuditLog] = []
    for entry in entries:
        if keywords is not None:
            upper_action = (entry.action or "").upper()
            if not any(keyword in upper_action for keyword in keywords):
                continue
        if needle and needle not in _search_haystack(entry):
            continue
        selected.append(entry)
    return selected


def list_audit_logs(
    session: Session,
    *,
    action_filter: str | None = AUDIT_FILTER_ALL,
    search: str | None = None,
) -> list[AuditLog]:
    """Return stored audit entries, newest first, narrowed by filter and search."""

    repository = AuditLogRepository(session)
    return filter_audit_logs(repository.list(), action_filter=action_filter, search=search)


__all__ = [
    "AUDIT_FILTER_ALL",
    "AUDIT_FILTER_AUTH",
    "AUDIT_FILTER_CREATE",
    "AUDIT_FILTER_DELETE",
    "AUDIT_FILTER_UPDATE",
    "AuditActionStyle",
    "classify_audit_action",
    "filter_audit_logs",
    "list_audit_logs",
]
