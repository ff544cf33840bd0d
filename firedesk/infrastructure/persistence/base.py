"""Base model and mixins for all database entities.

This module provides:
- BaseModel: Base class for ALL models (provides id, created_at)
- TimestampMixin: Internal mixin that adds updated_at
- BaseMutableModel: Base for models that can be edited (combines above)

Usage:
    # Editable records (users, institutions)
    class UserModel(BaseMutableModel):
        __tablename__ = "users"

    # Append-only records (log entries, lookup rows)
    class LogEntryModel(BaseModel):
        __tablename__ = "logs"

Ids are UUIDv7 strings so that they sort by creation time and stay
portable across PostgreSQL and SQLite.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


def new_id() -> str:
    """Generate a time-ordered string id."""
    return str(uuid7())


class BaseModel(DeclarativeBase):
    """Base class for all database models (mutable and immutable).

    Provides common fields that ALL database models need:
    - id: string primary key (UUIDv7 by default)
    - created_at: Timestamp when record was created, set by the database
    """

    __abstract__ = True

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Mixin for mutable models that track updates.

    Used via BaseMutableModel, not directly.
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models.

    Provides:
        - id, created_at (from BaseModel)
        - updated_at (from TimestampMixin)

    Append-only tables (logs, actions, tables) use BaseModel directly.
    """

    __abstract__ = True
