"""Authorization decision request/response schemas.

RESTful Endpoints:
    POST /api/v1/authorization/decisions - operation verdicts for the current actor
"""

from pydantic import BaseModel, ConfigDict, Field

from firedesk.domain.enums import ResourceKind
from firedesk.domain.value_objects import OwnershipView


class OwnershipViewRequest(BaseModel):
    """Ownership attributes of the resource instance being checked."""

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

    def to_domain(self) -> OwnershipView:
        """Convert to the domain value object."""
        return OwnershipView(**self.model_dump())


class DecisionRequest(BaseModel):
    """Request body for a decision."""

    resource: ResourceKind = Field(..., description="Resource kind")
    ownership: OwnershipViewRequest | None = Field(
        None,
        description="Instance attributes; omit for collection-level checks",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "resource": "Devices",
                "ownership": {"owner_id": "u1", "provider_id": "u9"},
            }
        }
    )


class DecisionResponse(BaseModel):
    """Operation verdicts for the current actor."""

    resource: ResourceKind
    can_view: bool
    can_create: bool
    can_update: bool
    can_delete: bool
    can_respond: bool = Field(
        False, description="Answer an offer request with an offer"
    )
