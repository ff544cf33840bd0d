"""Domain protocols (ports).

Infrastructure adapters implement these structurally; nothing inherits
from them.
"""

from firedesk.domain.protocols.audit_protocol import AuditProtocol
from firedesk.domain.protocols.authorization_protocol import AuthorizationProtocol
from firedesk.domain.protocols.logger_protocol import LoggerProtocol
from firedesk.domain.protocols.user_repository import UserRepository

__all__ = [
    "AuditProtocol",
    "AuthorizationProtocol",
    "LoggerProtocol",
    "UserRepository",
]
