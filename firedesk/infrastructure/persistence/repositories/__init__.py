"""Repository implementations (SQLAlchemy adapters)."""

from firedesk.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = ["UserRepository"]
