"""User database model.

Only identity, role and tenancy columns are mapped; authentication
columns belong to the session provider.
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from firedesk.infrastructure.persistence.base import BaseMutableModel


class UserModel(BaseMutableModel):
    """User record.

    Fields:
        name: Display name (searched by the audit log listing).
        email: Unique login email.
        role: UserRole value; nullable for legacy rows.
        institution_id: Owning institution.
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
    )
    role: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    institution_id: Mapped[str | None] = mapped_column(
        String(36),
        ForeignKey("institutions.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
