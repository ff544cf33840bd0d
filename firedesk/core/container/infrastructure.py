"""Infrastructure dependency factories.

Application-scoped singletons:
- Database (PostgreSQL in production, SQLite in tests)
- Logging (structlog console adapter)
- Session tokens (JWT)

Request-scoped:
- Database sessions
- Audit store bound to its own session
"""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from firedesk.core.config import settings
from firedesk.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from firedesk.domain.protocols.audit_protocol import AuditProtocol
    from firedesk.domain.protocols.logger_protocol import LoggerProtocol
    from firedesk.infrastructure.security.jwt_service import ActorTokenService


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Prefer get_db_session() for per-request sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)
    """
    from firedesk.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.is_testing or settings.is_ci
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


@lru_cache()
def get_token_service() -> "ActorTokenService":
    """Get session token service singleton (app-scoped)."""
    from firedesk.infrastructure.security.jwt_service import ActorTokenService

    return ActorTokenService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
        algorithm=settings.algorithm,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


async def get_audit_session() -> AsyncGenerator[AsyncSession, None]:
    """Get audit session (request-scoped, independent lifecycle).

    Separate from get_db_session() so audit commits never ride on, or roll
    back with, the mutation's own session.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


async def get_audit(
    audit_session: AsyncSession = Depends(get_audit_session),
) -> "AuditProtocol":
    """Get audit store adapter (request-scoped, on the audit session)."""
    from firedesk.infrastructure.audit.postgres_adapter import PostgresAuditAdapter

    return PostgresAuditAdapter(
        session=audit_session,
        max_limit=settings.audit_query_max_limit,
    )
