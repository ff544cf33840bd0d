"""Domain errors."""

from firedesk.domain.errors.audit_error import AuditError

__all__ = ["AuditError"]
