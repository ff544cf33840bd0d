"""Ownership view value object.

Projection of the ownership-relevant attributes of one resource instance.
Only the attributes a rule reads need to be filled in.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class OwnershipView:
    """Ownership attributes of a resource instance.

    Attributes:
        resource_id: Id of the resource itself (institution rules).
        owner_id: Owning user (devices).
        provider_id: Servicing provider user (devices).
        provider_ins_id: Servicing provider institution (maintenance cards).
        customer_ins_id: Customer institution (maintenance cards).
        creator_id: Creating user (appointments, offers).
        creator_ins_id: Creating institution (appointments, offers).
        recipient_id: Receiving user (appointments, notifications).
        recipient_ins_id: Receiving institution.
        institution_id: Institution a user account belongs to.
        status: Lifecycle status (offer requests).
    """

    resource_id: str | None = None
    owner_id: str | None = None
    provider_id: str | None = None
    provider_ins_id: str | None = None
    customer_ins_id: str | None = None
    creator_id: str | None = None
    creator_ins_id: str | None = None
    recipient_id: str | None = None
    recipient_ins_id: str | None = None
    institution_id: str | None = None
    status: str | None = None
