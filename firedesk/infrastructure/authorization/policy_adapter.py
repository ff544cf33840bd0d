"""Rule-table implementation of AuthorizationProtocol.

Delegates to the pure access policy and adds structured logging of every
decision. Errors inside the policy deny the request.
"""

from typing import TYPE_CHECKING

from firedesk.domain.enums import Operation, ResourceKind
from firedesk.domain.policies import access_policy
from firedesk.domain.value_objects import Actor, Decision, OwnershipView

if TYPE_CHECKING:
    from firedesk.domain.protocols.logger_protocol import LoggerProtocol


class PolicyAuthorizationAdapter:
    """Authorization adapter backed by the static access policy.

    Attributes:
        _logger: Structured logger.
    """

    def __init__(self, logger: "LoggerProtocol") -> None:
        self._logger = logger

    def authorize(
        self,
        actor: Actor,
        operation: Operation,
        resource: ResourceKind,
        ownership: OwnershipView | None = None,
    ) -> bool:
        """Check one operation, logging the outcome.

        Returns:
            bool: True if allowed, False if denied or if the check failed.
        """
        try:
            allowed = access_policy.authorize(actor, operation, resource, ownership)
        except Exception as e:
            # Fail closed on errors
            self._logger.error(
                "authorization_check_error",
                error=e,
                user_id=actor.user_id,
                resource=resource.value,
                operation=operation.value,
            )
            return False

        log = self._logger.debug if allowed else self._logger.info
        log(
            "authorization_checked" if allowed else "authorization_denied",
            user_id=actor.user_id,
            role=actor.role.value if actor.role else None,
            resource=resource.value,
            operation=operation.value,
            allowed=allowed,
        )
        return allowed

    def decide(
        self,
        actor: Actor,
        resource: ResourceKind,
        ownership: OwnershipView | None = None,
    ) -> Decision:
        """Evaluate every operation verdict through ``authorize``."""
        return Decision(
            can_view=self.authorize(actor, Operation.VIEW, resource, ownership),
            can_create=self.authorize(actor, Operation.CREATE, resource, ownership),
            can_update=self.authorize(actor, Operation.UPDATE, resource, ownership),
            can_delete=self.authorize(actor, Operation.DELETE, resource, ownership),
            can_respond=self.authorize(
                actor, Operation.RESPOND, resource, ownership
            ),
        )
