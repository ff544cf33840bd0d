"""Authorization dependencies.

Collection-level checks (no instance attributes) expressed as FastAPI
dependencies. Instance-level checks call the authorization adapter inside
the handler once the ownership view is known.

Usage:
    @router.get("/audit-logs")
    async def list_audit_logs(
        actor: Actor = Depends(require_operation(ResourceKind.LOGS, Operation.VIEW)),
    ):
        ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, status

from firedesk.core.container import get_authorization
from firedesk.domain.enums import Operation, ResourceKind
from firedesk.domain.protocols.authorization_protocol import AuthorizationProtocol
from firedesk.domain.value_objects import Actor
from firedesk.presentation.routers.api.middleware.auth_dependencies import (
    get_current_actor,
)


def require_operation(
    resource: ResourceKind,
    operation: Operation,
) -> Callable[..., Awaitable[Actor]]:
    """Create a dependency that requires ``operation`` on ``resource``.

    Returns:
        Dependency returning the authorized Actor.

    Raises:
        HTTPException 403: If the policy denies the operation.
    """

    async def operation_checker(
        actor: Annotated[Actor, Depends(get_current_actor)],
        authorization: Annotated[AuthorizationProtocol, Depends(get_authorization)],
    ) -> Actor:
        if not authorization.authorize(actor, operation, resource):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {resource.value}:{operation.value}",
            )
        return actor

    return operation_checker
