"""Session authentication dependencies.

FastAPI dependencies that turn the bearer token into an Actor.

Usage:
    @router.get("/protected")
    async def protected_route(
        actor: Actor = Depends(get_current_actor),
    ):
        return {"user_id": actor.user_id}
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from firedesk.core.container import get_token_service
from firedesk.core.result import Failure, Success
from firedesk.domain.value_objects import Actor
from firedesk.infrastructure.security.jwt_service import ActorTokenService

# auto_error=False so a missing header gets the same 401 shape as a bad token
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_actor(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    token_service: Annotated[ActorTokenService, Depends(get_token_service)],
) -> Actor:
    """Get the acting identity from the session token.

    Raises:
        HTTPException 401: If the token is missing, invalid, or expired.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    match token_service.validate_token(credentials.credentials):
        case Success(value=actor):
            return actor
        case Failure(error=error):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=error.message,
                headers={"WWW-Authenticate": "Bearer"},
            )
