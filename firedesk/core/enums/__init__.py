"""Core enums package.

Usage:
    from firedesk.core.enums import ErrorCode, Environment
"""

from firedesk.core.enums.environment import Environment
from firedesk.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
