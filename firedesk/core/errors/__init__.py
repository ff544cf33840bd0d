"""Core errors package.

Usage:
    from firedesk.core.errors import DomainError, AuthenticationError
"""

from firedesk.core.errors.common_errors import AuthenticationError
from firedesk.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "AuthenticationError",
]
