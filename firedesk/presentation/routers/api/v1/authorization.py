"""Authorization decision endpoint.

POST /api/v1/authorization/decisions
"""

from fastapi import APIRouter, Depends

from firedesk.core.container import get_authorization
from firedesk.domain.protocols.authorization_protocol import AuthorizationProtocol
from firedesk.domain.value_objects import Actor
from firedesk.presentation.routers.api.middleware.auth_dependencies import (
    get_current_actor,
)
from firedesk.schemas.authorization_schemas import DecisionRequest, DecisionResponse

router = APIRouter(prefix="/authorization", tags=["Authorization"])


@router.post(
    "/decisions",
    response_model=DecisionResponse,
    summary="Evaluate permissions for a resource instance",
)
async def create_decision(
    data: DecisionRequest,
    actor: Actor = Depends(get_current_actor),
    authorization: AuthorizationProtocol = Depends(get_authorization),
) -> DecisionResponse:
    """Return view/create/update/delete/respond verdicts for the current actor.

    Denials are part of the answer, not errors: the response is 200 with
    false flags.
    """
    ownership = data.ownership.to_domain() if data.ownership else None
    decision = authorization.decide(actor, data.resource, ownership)
    return DecisionResponse(
        resource=data.resource,
        can_view=decision.can_view,
        can_create=decision.can_create,
        can_update=decision.can_update,
        can_delete=decision.can_delete,
        can_respond=decision.can_respond,
    )
