"""Container module - Centralized dependency injection.

Re-exports every factory so callers import from one place:

    from firedesk.core.container import get_audit_recorder, get_logger

Modules:
- infrastructure: database, sessions, audit store, logging, session tokens
- repositories: repository factories
- authorization: access policy adapter
- services: application services
"""

from firedesk.core.container.authorization import get_authorization
from firedesk.core.container.infrastructure import (
    get_audit,
    get_audit_session,
    get_database,
    get_db_session,
    get_logger,
    get_token_service,
)
from firedesk.core.container.repositories import get_user_repository
from firedesk.core.container.services import get_audit_recorder

__all__ = [
    "get_audit",
    "get_audit_recorder",
    "get_audit_session",
    "get_authorization",
    "get_database",
    "get_db_session",
    "get_logger",
    "get_token_service",
    "get_user_repository",
]
