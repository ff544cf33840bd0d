"""User domain entity.

Only the attributes needed for audit attribution and authorization.
"""

from dataclasses import dataclass
from datetime import datetime

from firedesk.domain.enums.user_role import UserRole


@dataclass
class User:
    """Dashboard user.

    Attributes:
        id: Unique user identifier.
        name: Display name.
        email: Login email.
        role: Dashboard role (None for legacy rows without a role).
        institution_id: Owning institution, if any.
        created_at: Timestamp when user was created.
    """

    id: str
    name: str
    email: str
    role: UserRole | None = None
    institution_id: str | None = None
    created_at: datetime | None = None
