"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Error codes and runtime environment enums

The core module has NO dependencies on other application layers.
"""

from firedesk.core.enums import ErrorCode
from firedesk.core.errors import AuthenticationError, DomainError
from firedesk.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
