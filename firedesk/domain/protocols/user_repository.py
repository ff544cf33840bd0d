"""UserRepository protocol for user lookups.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol

from firedesk.domain.entities.user import User
from firedesk.domain.enums import UserRole


class UserRepository(Protocol):
    """User repository protocol (port).

    Methods:
        find_by_id: Retrieve user by ID
        find_first_by_role: Retrieve any one user holding a role
        find_first: Retrieve any one user
    """

    async def find_by_id(self, user_id: str) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_first_by_role(self, role: UserRole) -> User | None:
        """Find the earliest created user holding ``role``.

        Returns:
            User if any holds the role, None otherwise.
        """
        ...

    async def find_first(self) -> User | None:
        """Find the earliest created user of any role."""
        ...
