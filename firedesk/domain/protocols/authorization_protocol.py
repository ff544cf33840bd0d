"""Authorization protocol (port).

Route handlers depend on this protocol rather than on the policy module,
so decisions can be logged and faked in tests.
"""

from typing import Protocol

from firedesk.domain.enums import Operation, ResourceKind
from firedesk.domain.value_objects import Actor, Decision, OwnershipView


class AuthorizationProtocol(Protocol):
    """Protocol for authorization checks.

    Implementations MUST fail closed: any internal error yields a denial.
    """

    def authorize(
        self,
        actor: Actor,
        operation: Operation,
        resource: ResourceKind,
        ownership: OwnershipView | None = None,
    ) -> bool:
        """Return True if ``actor`` may perform ``operation`` on the resource."""
        ...

    def decide(
        self,
        actor: Actor,
        resource: ResourceKind,
        ownership: OwnershipView | None = None,
    ) -> Decision:
        """Return the view/create/update/delete verdicts for one resource."""
        ...
