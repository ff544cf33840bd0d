"""Audit trail protocol (port).

Following hexagonal architecture:
- Domain defines the PORT (this protocol)
- Infrastructure provides the ADAPTER (PostgresAuditAdapter)
- Application layer (AuditRecorder) uses the protocol only

Usage:
    from firedesk.domain.protocols import AuditProtocol

    audit: AuditProtocol = Depends(get_audit)

    result = await audit.record(
        user_id=user.id,
        action_name=AuditAction.CREATE.value,
        table_name=ResourceKind.DEVICES.value,
        ip="10.0.0.1",
    )
"""

from datetime import datetime
from typing import Any, Protocol

from firedesk.core.result import Result
from firedesk.domain.entities.log_entry import LogEntry
from firedesk.domain.errors import AuditError


class AuditProtocol(Protocol):
    """Protocol for audit trail storage.

    Log entries are append-only: implementations expose no update or delete.

    Error Handling:
        All methods return Result types (Success or Failure).
        NEVER raise exceptions - wrap in Failure(AuditError(...)) instead.
    """

    async def record(
        self,
        *,
        user_id: str,
        action_name: str,
        table_name: str,
        ip: str,
    ) -> Result[LogEntry, AuditError]:
        """Append one log entry.

        Resolves the ``actions`` and ``tables`` lookup rows by name, creating
        them if absent, then inserts the entry. Lookup rows created before a
        failing insert are kept.

        Args:
            user_id: Attributed user (already resolved, must exist).
            action_name: Action label, e.g. "EKLE".
            table_name: Table kind, e.g. "Devices".
            ip: Request origin.

        Returns:
            Result[LogEntry, AuditError]:
                - Success(LogEntry) with the inserted row
                - Failure(AuditError) if any step failed
        """
        ...

    async def query(
        self,
        *,
        user_id: str | None = None,
        action_id: str | None = None,
        table_id: str | None = None,
        ip: str | None = None,
        search: str | None = None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        sort_by: str = "date",
        sort_order: str = "desc",
        limit: int = 10,
        offset: int = 0,
    ) -> Result[tuple[list[dict[str, Any]], int], AuditError]:
        """Query the audit trail (read-only).

        Args:
            user_id: Exact attributed user.
            action_id: Exact action lookup row.
            table_id: Exact table lookup row.
            ip: Case-insensitive substring of the origin.
            search: Case-insensitive substring of user name, action name,
                table name or origin.
            date_from: Lower bound on entry date (inclusive).
            date_to: Upper bound on entry date (inclusive).
            sort_by: One of date, user, action, table, ip.
            sort_order: asc or desc.
            limit: Page size (capped by the adapter).
            offset: Rows to skip.

        Returns:
            Result[tuple[list[dict[str, Any]], int], AuditError]:
                - Success((entries, total)) where total ignores pagination
                - Failure(AuditError) if the query failed
        """
        ...

    async def list_filter_options(
        self,
    ) -> Result[dict[str, list[dict[str, str]]], AuditError]:
        """List action and table lookup rows for filter dropdowns.

        Returns:
            Success({"actions": [{"id", "name"}], "tables": [{"id", "name"}]}).
        """
        ...

    async def activity_by_month(
        self, year: int
    ) -> Result[list[dict[str, int]], AuditError]:
        """Count entries per month of ``year`` grouped by attributed role group.

        Returns:
            Success with twelve dicts {"month", "customer", "provider", "admin"}.
        """
        ...
