"""Audit trail action names.

Action names are stored verbatim in the ``actions`` lookup table, so values
keep the dashboard's Turkish labels.

Usage:
    from firedesk.domain.enums import AuditAction

    await recorder.record_action(user_id, AuditAction.CREATE, ResourceKind.DEVICES, headers)
"""

from enum import Enum


class AuditAction(str, Enum):
    """Mutating actions recorded in the audit trail."""

    CREATE = "EKLE"
    """Resource created."""

    UPDATE = "GÜNCELLE"
    """Resource updated."""

    DELETE = "SİL"
    """Resource deleted."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all action names as strings."""
        return [action.value for action in cls]
