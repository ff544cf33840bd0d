"""Access policy for the fire-safety dashboard.

Single source of truth for "may this actor perform this operation on this
resource instance". Decisions depend on the actor's role plus equality
between the actor's user/institution id and ownership attributes of the
resource.

Role shorthand used below:
    A   ADMIN
    C1  MUSTERI_SEVIYE1 (customer, institution-wide)
    C2  MUSTERI_SEVIYE2 (customer, own records)
    P1  HIZMETSAGLAYICI_SEVIYE1 (provider, institution-wide)
    P2  HIZMETSAGLAYICI_SEVIYE2 (provider, own records)

Every id comparison fails closed: a missing or empty id on either side never
matches. Operations without a rule are denied.

Usage:
    from firedesk.domain.policies import authorize, decide

    if not authorize(actor, Operation.DELETE, ResourceKind.DEVICES, ownership):
        raise HTTPException(status_code=403)

    decision = decide(actor, ResourceKind.OFFER_CARDS, ownership)
"""

from collections.abc import Callable

from firedesk.domain.enums import Operation, RequestStatus, ResourceKind, UserRole
from firedesk.domain.value_objects import Actor, Decision, OwnershipView

type Rule = Callable[[Actor, OwnershipView], bool]

A = UserRole.ADMIN
C1 = UserRole.MUSTERI_SEVIYE1
C2 = UserRole.MUSTERI_SEVIYE2
P1 = UserRole.HIZMETSAGLAYICI_SEVIYE1
P2 = UserRole.HIZMETSAGLAYICI_SEVIYE2

DASHBOARD_ROLES = (A, C1, C2, P1, P2)


def _same(left: str | None, right: str | None) -> bool:
    return bool(left) and bool(right) and left == right


def _roles(*roles: UserRole) -> Rule:
    """Allow the listed roles unconditionally."""

    def rule(actor: Actor, ownership: OwnershipView) -> bool:
        return actor.role in roles

    return rule


def _owns(attribute: str, *roles: UserRole) -> Rule:
    """Allow the listed roles when the actor's user id equals ``attribute``."""

    def rule(actor: Actor, ownership: OwnershipView) -> bool:
        return actor.role in roles and _same(
            actor.user_id, getattr(ownership, attribute)
        )

    return rule


def _member_of(attribute: str, *roles: UserRole) -> Rule:
    """Allow the listed roles when the actor's institution equals ``attribute``."""

    def rule(actor: Actor, ownership: OwnershipView) -> bool:
        return actor.role in roles and _same(
            actor.institution_id, getattr(ownership, attribute)
        )

    return rule


def _any(*rules: Rule) -> Rule:
    def rule(actor: Actor, ownership: OwnershipView) -> bool:
        return any(r(actor, ownership) for r in rules)

    return rule


def _identified(*rules: Rule) -> Rule:
    """Admins pass; everyone else needs both ids before ``rules`` apply."""

    def rule(actor: Actor, ownership: OwnershipView) -> bool:
        if actor.is_admin:
            return True
        return actor.has_identity and any(r(actor, ownership) for r in rules)

    return rule


def _has_role(actor: Actor, ownership: OwnershipView) -> bool:
    return actor.role is not None


def _open_request(actor: Actor, ownership: OwnershipView) -> bool:
    return actor.role in (A, P1, P2) and ownership.status == RequestStatus.ACTIVE.value


_admin = _roles(A)

_device_delete = _any(_admin, _owns("owner_id", C1))
_appointment_change = _identified(
    _owns("creator_id", P2),
    _member_of("creator_ins_id", P1),
)
_institution_delete = _any(_admin, _member_of("resource_id", C1, P1))
_isg_manage = _roles(A, P2)
_maintenance_change = _any(_admin, _member_of("provider_ins_id", P1, P2))
_user_delete = _any(_admin, _member_of("institution_id", C1, P1))

RULES: dict[ResourceKind, dict[Operation, Rule]] = {
    ResourceKind.DEVICES: {
        Operation.VIEW: _any(
            _admin,
            _owns("owner_id", C1, C2),
            _owns("provider_id", P1, P2),
        ),
        Operation.CREATE: _roles(A, C1, C2),
        Operation.UPDATE: _device_delete,
        Operation.DELETE: _device_delete,
    },
    ResourceKind.APPOINTMENTS: {
        Operation.VIEW: _identified(
            _owns("recipient_id", C2),
            _member_of("recipient_ins_id", C1),
            _owns("creator_id", P2),
            _member_of("creator_ins_id", P1),
        ),
        Operation.CREATE: _roles(A, P1, P2),
        Operation.UPDATE: _appointment_change,
        Operation.DELETE: _appointment_change,
    },
    ResourceKind.INSTITUTIONS: {
        Operation.VIEW: _roles(*DASHBOARD_ROLES),
        Operation.CREATE: _roles(A, C1, P1),
        Operation.UPDATE: _institution_delete,
        Operation.DELETE: _institution_delete,
    },
    ResourceKind.ISG_MEMBERS: {
        Operation.VIEW: _has_role,
        Operation.CREATE: _isg_manage,
        Operation.UPDATE: _isg_manage,
        Operation.DELETE: _isg_manage,
    },
    ResourceKind.MAINTENANCE_CARDS: {
        Operation.VIEW: _any(
            _admin,
            _member_of("customer_ins_id", C1, C2),
            _member_of("provider_ins_id", P1, P2),
        ),
        Operation.CREATE: _roles(A, P1, P2),
        Operation.UPDATE: _maintenance_change,
        Operation.DELETE: _maintenance_change,
    },
    ResourceKind.NOTIFICATIONS: {
        Operation.VIEW: _identified(
            _owns("recipient_id", C2, P2),
            _member_of("recipient_ins_id", C1, P1),
        ),
        Operation.CREATE: _admin,
        Operation.UPDATE: _admin,
        Operation.DELETE: _admin,
    },
    ResourceKind.OFFER_REQUESTS: {
        Operation.VIEW: _any(
            _roles(A, P1, P2),
            _member_of("creator_ins_id", C1, C2),
        ),
        Operation.CREATE: _roles(A, C1),
        Operation.UPDATE: _any(
            _admin,
            _member_of("creator_ins_id", C1),
            _owns("creator_id", C2),
        ),
        Operation.DELETE: _any(_admin, _member_of("creator_ins_id", C1)),
        Operation.RESPOND: _open_request,
    },
    ResourceKind.OFFER_CARDS: {
        Operation.VIEW: _any(
            _admin,
            _member_of("recipient_ins_id", C1, C2),
            _member_of("creator_ins_id", P1, P2),
        ),
        Operation.CREATE: _roles(A, P1, P2),
        Operation.UPDATE: _any(
            _admin,
            _member_of("creator_ins_id", P1),
            _owns("creator_id", P2),
        ),
        Operation.DELETE: _any(_admin, _member_of("creator_ins_id", P1)),
    },
    ResourceKind.USERS: {
        Operation.VIEW: _roles(*DASHBOARD_ROLES),
        Operation.CREATE: _roles(A, C1, P1),
        Operation.UPDATE: _user_delete,
        Operation.DELETE: _user_delete,
    },
    ResourceKind.LOGS: {
        Operation.VIEW: _admin,
    },
}


def allowed_operations(resource: ResourceKind) -> frozenset[Operation]:
    """Operations that have a rule for ``resource``."""
    return frozenset(RULES.get(resource, {}))


def authorize(
    actor: Actor,
    operation: Operation,
    resource: ResourceKind,
    ownership: OwnershipView | None = None,
) -> bool:
    """Decide whether ``actor`` may perform ``operation`` on a resource.

    Args:
        actor: Session identity. A missing role denies everything.
        operation: Requested operation.
        resource: Resource kind.
        ownership: Ownership attributes of the instance. Omit for
            collection-level checks such as create.

    Returns:
        bool: True if allowed. Never raises for well-typed input.
    """
    if actor.role is None:
        return False
    rule = RULES.get(resource, {}).get(operation)
    if rule is None:
        return False
    return rule(actor, ownership or OwnershipView())


def decide(
    actor: Actor,
    resource: ResourceKind,
    ownership: OwnershipView | None = None,
) -> Decision:
    """Evaluate every operation verdict for one resource instance.

    ``can_respond`` is only ever True for OfferRequests.
    """
    return Decision(
        can_view=authorize(actor, Operation.VIEW, resource, ownership),
        can_create=authorize(actor, Operation.CREATE, resource, ownership),
        can_update=authorize(actor, Operation.UPDATE, resource, ownership),
        can_delete=authorize(actor, Operation.DELETE, resource, ownership),
        can_respond=authorize(actor, Operation.RESPOND, resource, ownership),
    )
