"""Application services."""

from firedesk.application.services.audit_recorder import AuditRecorder

__all__ = ["AuditRecorder"]
