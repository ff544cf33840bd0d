"""Session token handling."""

from firedesk.infrastructure.security.jwt_service import ActorTokenService

__all__ = ["ActorTokenService"]
