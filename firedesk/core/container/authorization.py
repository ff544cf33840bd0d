"""Authorization dependency factory."""

from functools import lru_cache
from typing import TYPE_CHECKING

from firedesk.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from firedesk.domain.protocols.authorization_protocol import (
        AuthorizationProtocol,
    )


@lru_cache()
def get_authorization() -> "AuthorizationProtocol":
    """Get authorization adapter singleton (app-scoped).

    The policy is stateless, so one instance serves every request.
    """
    from firedesk.infrastructure.authorization.policy_adapter import (
        PolicyAuthorizationAdapter,
    )

    return PolicyAuthorizationAdapter(logger=get_logger())
