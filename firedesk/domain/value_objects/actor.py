"""Actor value object.

The identity performing an operation, as carried by the session.

Usage:
    from firedesk.domain.value_objects import Actor
    from firedesk.domain.enums import UserRole

    actor = Actor(
        role=UserRole.MUSTERI_SEVIYE1,
        user_id="u1",
        institution_id="ins-9",
    )
"""

from dataclasses import dataclass

from firedesk.domain.enums.user_role import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class Actor:
    """Session identity (value object).

    Any attribute may be missing. A missing role denies everything, and a
    missing id never matches an ownership attribute.

    Attributes:
        role: Dashboard role, None when the session carries no role.
        user_id: Acting user's id.
        institution_id: Institution the acting user belongs to.
    """

    role: UserRole | None = None
    user_id: str | None = None
    institution_id: str | None = None

    @property
    def is_admin(self) -> bool:
        """True if the actor holds the ADMIN role."""
        return self.role == UserRole.ADMIN

    @property
    def has_identity(self) -> bool:
        """True if both user and institution ids are present."""
        return bool(self.user_id) and bool(self.institution_id)
