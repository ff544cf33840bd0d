"""Domain policies (pure decision functions)."""

from firedesk.domain.policies.access_policy import (
    allowed_operations,
    authorize,
    decide,
)

__all__ = ["allowed_operations", "authorize", "decide"]
