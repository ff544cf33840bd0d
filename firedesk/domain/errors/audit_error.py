"""Audit trail error types.

Used when attributing, recording or querying audit entries fails.

Usage:
    from firedesk.domain.errors import AuditError
    from firedesk.core.enums import ErrorCode
    from firedesk.core.result import Failure

    return Failure(error=AuditError(
        code=ErrorCode.AUDIT_RECORD_FAILED,
        message="Failed to record audit entry: database connection lost",
    ))
"""

from dataclasses import dataclass

from firedesk.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditError(DomainError):
    """Audit system failure.

    Attributes:
        code: ErrorCode enum (AUDIT_LOOKUP_FAILED, AUDIT_RECORD_FAILED,
            AUDIT_QUERY_FAILED).
        message: Human-readable message.
        details: Additional context.
    """

    pass
