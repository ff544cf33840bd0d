"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from firedesk.domain.entities.user import User
from firedesk.domain.enums import UserRole
from firedesk.infrastructure.persistence.models.user import UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    "First" means earliest created; ties are broken by id, which is
    time-ordered (UUIDv7).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with db.get_session() as session:
        ...     repo = UserRepository(session)
        ...     admin = await repo.find_first_by_role(UserRole.ADMIN)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, user_id: str) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def find_first_by_role(self, role: UserRole) -> User | None:
        """Find the earliest created user holding ``role``."""
        stmt = (
            select(UserModel)
            .where(UserModel.role == role.value)
            .order_by(UserModel.created_at, UserModel.id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def find_first(self) -> User | None:
        """Find the earliest created user of any role."""
        stmt = select(UserModel).order_by(UserModel.created_at, UserModel.id).limit(1)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        if user_model is None:
            return None
        return self._to_domain(user_model)

    async def save(self, user: User) -> None:
        """Create new user in database.

        Args:
            user: Domain User entity to persist.

        Raises:
            IntegrityError: If the email already exists.
        """
        user_model = self._to_model(user)
        self.session.add(user_model)
        await self.session.commit()
        await self.session.refresh(user_model)

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity.

        Unknown role strings map to None so the policy denies them.
        """
        role = (
            UserRole(user_model.role)
            if user_model.role and UserRole.is_valid(user_model.role)
            else None
        )
        return User(
            id=user_model.id,
            name=user_model.name,
            email=user_model.email,
            role=role,
            institution_id=user_model.institution_id,
            created_at=user_model.created_at,
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to database model."""
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role.value if user.role else None,
            institution_id=user.institution_id,
        )
