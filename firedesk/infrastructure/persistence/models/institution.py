"""Institution database model.

Institutions are the tenants: customer organisations and service
providers.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from firedesk.infrastructure.persistence.base import BaseMutableModel


class InstitutionModel(BaseMutableModel):
    """Institution (tenant) record.

    Fields:
        name: Display name.
        address: Postal address, optional.
    """

    __tablename__ = "institutions"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
