"""Table-kind lookup model.

One row per distinct resource kind named in the audit trail ("Devices",
"OfferCards", ...). Rows are created lazily by the audit adapter.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from firedesk.infrastructure.persistence.base import BaseModel


class TableKindModel(BaseModel):
    """Audit table-kind lookup row. ``name`` is unique."""

    __tablename__ = "tables"

    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
