"""Authorization adapters."""

from firedesk.infrastructure.authorization.policy_adapter import (
    PolicyAuthorizationAdapter,
)

__all__ = ["PolicyAuthorizationAdapter"]
