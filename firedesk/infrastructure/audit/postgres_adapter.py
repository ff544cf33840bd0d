"""PostgreSQL implementation of AuditProtocol.

This adapter provides append-only audit logging with:
- Lazily created ``actions`` / ``tables`` lookup rows (unique by name)
- Async SQLAlchemy for database operations
- Result types for error handling (no exceptions)

Commit semantics:
    ``record`` commits after each step (action lookup, table lookup,
    entry insert). A failure late in the sequence leaves the lookup rows
    created earlier in place; they are reused by the next call.

Concurrency:
    Two writers creating the same lookup name race on the unique
    constraint. The loser rolls back and re-reads the winner's row, so
    both entries reference one consistent id.

Usage:
    adapter = PostgresAuditAdapter(session)

    result = await adapter.record(
        user_id="admin-1",
        action_name="EKLE",
        table_name="Devices",
        ip="10.0.0.1",
    )
"""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import Select, extract, func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from firedesk.core.enums import ErrorCode
from firedesk.core.result import Failure, Result, Success
from firedesk.domain.entities.log_entry import LogEntry
from firedesk.domain.enums import UserRole
from firedesk.domain.errors import AuditError
from firedesk.infrastructure.persistence.models import (
    ActionModel,
    LogEntryModel,
    TableKindModel,
    UserModel,
)

type LookupModel = type[ActionModel] | type[TableKindModel]


def _role_group(role: str | None) -> str | None:
    """Map a stored role to its activity bucket (customer, provider, admin)."""
    if not role or not UserRole.is_valid(role):
        return None
    member = UserRole(role)
    if member.is_customer:
        return "customer"
    if member.is_provider:
        return "provider"
    if member is UserRole.ADMIN:
        return "admin"
    return None


SORT_COLUMNS = {
    "date": LogEntryModel.created_at,
    "user": UserModel.name,
    "action": ActionModel.name,
    "table": TableKindModel.name,
    "ip": LogEntryModel.ip,
}


class PostgresAuditAdapter:
    """PostgreSQL implementation of AuditProtocol.

    Works unchanged on SQLite (used by the test suite).

    Attributes:
        session: SQLAlchemy async session for database operations.
        max_limit: Upper bound applied to query page sizes.

    Thread Safety:
        Not safe for concurrent use of one instance; each request gets its
        own session and adapter.
    """

    def __init__(self, session: AsyncSession, max_limit: int = 1000) -> None:
        """Initialize adapter with database session.

        Args:
            session: SQLAlchemy async session (injected by container).
            max_limit: Cap for ``query`` page size.
        """
        self.session = session
        self.max_limit = max_limit

    async def record(
        self,
        *,
        user_id: str,
        action_name: str,
        table_name: str,
        ip: str,
    ) -> Result[LogEntry, AuditError]:
        """Append one log entry, creating lookup rows as needed.

        Returns:
            Result[LogEntry, AuditError]:
                - Success(LogEntry) with the inserted row
                - Failure(AuditError) with code AUDIT_LOOKUP_FAILED or
                  AUDIT_RECORD_FAILED
        """
        details = {"action": action_name, "table": table_name}

        try:
            action_id = await self._get_or_create(ActionModel, action_name)
            table_id = await self._get_or_create(TableKindModel, table_name)
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_LOOKUP_FAILED,
                    message=f"Failed to resolve audit lookup rows: {str(e)}",
                    details={**details, "error_type": type(e).__name__},
                )
            )

        try:
            entry = LogEntryModel(
                user_id=user_id,
                action_id=action_id,
                table_id=table_id,
                ip=ip,
            )
            self.session.add(entry)
            await self.session.commit()
            await self.session.refresh(entry)
            return Success(value=self._to_domain(entry))

        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_RECORD_FAILED,
                    message=f"Failed to record audit log: {str(e)}",
                    details={**details, "error_type": type(e).__name__},
                )
            )
        except Exception as e:
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_RECORD_FAILED,
                    message=f"Unexpected error recording audit log: {str(e)}",
                    details={**details, "error_type": type(e).__name__},
                )
            )

    async def _get_or_create(self, model: LookupModel, name: str) -> str:
        """Return the id of the lookup row named ``name``, inserting it if absent.

        Raises:
            SQLAlchemyError: If the row can neither be read nor created.
        """
        existing = await self._find_lookup_id(model, name)
        if existing is not None:
            return existing

        row = model(name=name)
        self.session.add(row)
        try:
            await self.session.commit()
        except IntegrityError:
            # Another writer committed the same name first.
            await self.session.rollback()
            winner = await self._find_lookup_id(model, name)
            if winner is None:
                raise
            return winner
        return row.id

    async def _find_lookup_id(self, model: LookupModel, name: str) -> str | None:
        result = await self.session.execute(select(model.id).where(model.name == name))
        return result.scalar_one_or_none()

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
        """Query the audit trail with filters, sorting and pagination.

        Unknown ``sort_by`` values fall back to date. Ties are broken by
        entry id so pages are stable.

        Returns:
            Result[tuple[list[dict[str, Any]], int], AuditError]:
                - Success((entries, total))
                - Failure(AuditError) if database operation failed

            Each entry dict contains: id, user_id, user_name, user_email,
            user_role, action_id, action_name, table_id, table_name, ip,
            date (ISO 8601).
        """
        try:
            limit = max(1, min(limit, self.max_limit))
            offset = max(0, offset)

            stmt = self._joined(
                select(
                    LogEntryModel,
                    UserModel.name,
                    UserModel.email,
                    UserModel.role,
                    ActionModel.name,
                    TableKindModel.name,
                )
            )
            count_stmt = self._joined(select(func.count(LogEntryModel.id)))

            conditions = []
            if user_id:
                conditions.append(LogEntryModel.user_id == user_id)
            if action_id:
                conditions.append(LogEntryModel.action_id == action_id)
            if table_id:
                conditions.append(LogEntryModel.table_id == table_id)
            if ip:
                conditions.append(LogEntryModel.ip.ilike(f"%{ip}%"))
            if search:
                pattern = f"%{search}%"
                conditions.append(
                    or_(
                        UserModel.name.ilike(pattern),
                        ActionModel.name.ilike(pattern),
                        TableKindModel.name.ilike(pattern),
                        LogEntryModel.ip.ilike(pattern),
                    )
                )
            if date_from is not None:
                conditions.append(LogEntryModel.created_at >= date_from)
            if date_to is not None:
                conditions.append(LogEntryModel.created_at <= date_to)

            if conditions:
                stmt = stmt.where(*conditions)
                count_stmt = count_stmt.where(*conditions)

            column = SORT_COLUMNS.get(sort_by, LogEntryModel.created_at)
            if sort_order == "asc":
                stmt = stmt.order_by(column.asc(), LogEntryModel.id.asc())
            else:
                stmt = stmt.order_by(column.desc(), LogEntryModel.id.desc())

            total = (await self.session.execute(count_stmt)).scalar_one()
            rows = (await self.session.execute(stmt.limit(limit).offset(offset))).all()

            entries = [
                {
                    "id": entry.id,
                    "user_id": entry.user_id,
                    "user_name": user_name,
                    "user_email": user_email,
                    "user_role": user_role,
                    "action_id": entry.action_id,
                    "action_name": action_name,
                    "table_id": entry.table_id,
                    "table_name": table_name,
                    "ip": entry.ip,
                    "date": entry.created_at.isoformat() if entry.created_at else None,
                }
                for entry, user_name, user_email, user_role, action_name, table_name in rows
            ]
            return Success(value=(entries, total))

        except SQLAlchemyError as e:
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_QUERY_FAILED,
                    message=f"Failed to query audit logs: {str(e)}",
                    details={"error_type": type(e).__name__},
                )
            )

    @staticmethod
    def _joined(stmt: Select[Any]) -> Select[Any]:
        return (
            stmt.select_from(LogEntryModel)
            .join(UserModel, LogEntryModel.user_id == UserModel.id)
            .join(ActionModel, LogEntryModel.action_id == ActionModel.id)
            .join(TableKindModel, LogEntryModel.table_id == TableKindModel.id)
        )

    async def list_filter_options(
        self,
    ) -> Result[dict[str, list[dict[str, str]]], AuditError]:
        """List action and table lookup rows, ordered by name."""
        try:
            actions = await self.session.execute(
                select(ActionModel.id, ActionModel.name).order_by(ActionModel.name)
            )
            tables = await self.session.execute(
                select(TableKindModel.id, TableKindModel.name).order_by(
                    TableKindModel.name
                )
            )
            return Success(
                value={
                    "actions": [{"id": i, "name": n} for i, n in actions.all()],
                    "tables": [{"id": i, "name": n} for i, n in tables.all()],
                }
            )
        except SQLAlchemyError as e:
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_QUERY_FAILED,
                    message=f"Failed to list audit filter options: {str(e)}",
                    details={"error_type": type(e).__name__},
                )
            )

    async def activity_by_month(
        self, year: int
    ) -> Result[list[dict[str, int]], AuditError]:
        """Count entries per month of ``year`` by attributed role group.

        Entries attributed to users without a dashboard role are not counted.
        """
        try:
            start = datetime(year, 1, 1, tzinfo=UTC)
            end = datetime(year + 1, 1, 1, tzinfo=UTC)
            month = extract("month", LogEntryModel.created_at)

            stmt = (
                select(month, UserModel.role, func.count(LogEntryModel.id))
                .join(UserModel, LogEntryModel.user_id == UserModel.id)
                .where(LogEntryModel.created_at >= start)
                .where(LogEntryModel.created_at < end)
                .group_by(month, UserModel.role)
            )
            rows = (await self.session.execute(stmt)).all()

            summary = [
                {"month": m, "customer": 0, "provider": 0, "admin": 0}
                for m in range(1, 13)
            ]
            for row_month, role, count in rows:
                group = _role_group(role)
                if group is None:
                    continue
                summary[int(row_month) - 1][group] += count
            return Success(value=summary)

        except SQLAlchemyError as e:
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_QUERY_FAILED,
                    message=f"Failed to summarise audit activity: {str(e)}",
                    details={"year": str(year), "error_type": type(e).__name__},
                )
            )

    @staticmethod
    def _to_domain(entry: LogEntryModel) -> LogEntry:
        return LogEntry(
            id=entry.id,
            user_id=entry.user_id,
            action_id=entry.action_id,
            table_id=entry.table_id,
            ip=entry.ip,
            date=entry.created_at,
        )
