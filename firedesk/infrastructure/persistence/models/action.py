"""Action lookup model.

One row per distinct audit action name ("EKLE", "GÜNCELLE", "SİL").
Rows are created lazily by the audit adapter.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from firedesk.infrastructure.persistence.base import BaseModel


class ActionModel(BaseModel):
    """Audit action lookup row. ``name`` is unique."""

    __tablename__ = "actions"

    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
