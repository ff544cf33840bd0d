"""Common error classes used across layers.

Error Types:
- AuthenticationError: Missing, invalid or expired session token
"""

from dataclasses import dataclass

from firedesk.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid or expired session token)."""

    pass
