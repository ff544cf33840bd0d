"""Audit log entry entity.

Log entries are append-only. They are never updated or deleted.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class LogEntry:
    """One recorded mutation.

    Attributes:
        id: Entry identifier.
        user_id: Attributed user (never empty).
        action_id: Reference to the ``actions`` lookup row.
        table_id: Reference to the ``tables`` lookup row.
        ip: Request origin as derived from forwarding headers.
        date: Server-assigned creation time.
    """

    id: str
    user_id: str
    action_id: str
    table_id: str
    ip: str
    date: datetime | None = None
