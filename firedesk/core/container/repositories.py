"""Repository factories (request-scoped)."""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from firedesk.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from firedesk.domain.protocols.user_repository import UserRepository


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get user repository bound to the request's database session."""
    from firedesk.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)
