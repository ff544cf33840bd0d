"""User roles of the fire-safety dashboard.

Customers own extinguishers and receive services; providers service them.
Each side has two levels: level 1 acts for the whole institution, level 2
acts for its own records only.

Usage:
    from firedesk.domain.enums import UserRole

    if actor.role == UserRole.ADMIN:
        # Admin-only logic
"""

from enum import Enum


class UserRole(str, Enum):
    """Dashboard roles.

    String Enum:
        Values match the role column stored on users and the role claim
        carried by session tokens.
    """

    ADMIN = "ADMIN"
    """Platform administrator. Allowed every listed operation."""

    MUSTERI_SEVIYE1 = "MUSTERI_SEVIYE1"
    """Customer level 1 (institution-wide customer)."""

    MUSTERI_SEVIYE2 = "MUSTERI_SEVIYE2"
    """Customer level 2 (individual customer user)."""

    HIZMETSAGLAYICI_SEVIYE1 = "HIZMETSAGLAYICI_SEVIYE1"
    """Provider level 1 (institution-wide service provider)."""

    HIZMETSAGLAYICI_SEVIYE2 = "HIZMETSAGLAYICI_SEVIYE2"
    """Provider level 2 (individual technician)."""

    GUEST = "GUEST"
    USER = "USER"

    @property
    def is_customer(self) -> bool:
        """True for both customer levels."""
        return self in (UserRole.MUSTERI_SEVIYE1, UserRole.MUSTERI_SEVIYE2)

    @property
    def is_provider(self) -> bool:
        """True for both provider levels."""
        return self in (
            UserRole.HIZMETSAGLAYICI_SEVIYE1,
            UserRole.HIZMETSAGLAYICI_SEVIYE2,
        )

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values.
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()
