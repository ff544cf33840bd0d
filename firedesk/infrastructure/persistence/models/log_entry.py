"""Audit log entry model.

Append-only: nothing in the application updates or deletes these rows.
``created_at`` (from BaseModel) is the entry date.
"""

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from firedesk.infrastructure.persistence.base import BaseModel


class LogEntryModel(BaseModel):
    """Audit log entry.

    Fields:
        user_id: Attributed user.
        action_id: Action lookup row.
        table_id: Table-kind lookup row.
        ip: Request origin (forwarded-for chain, real IP or fallback).

    Indexes:
        - idx_logs_user_date: (user_id, created_at) for per-user listings
    """

    __tablename__ = "logs"

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    action_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("actions.id"),
        nullable=False,
        index=True,
    )
    table_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("tables.id"),
        nullable=False,
        index=True,
    )
    ip: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (Index("idx_logs_user_date", "user_id", "created_at"),)
